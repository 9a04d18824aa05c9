"""
Test cases for the configuration management system.
Tests config loading, merging, environment overrides and typed accessors.
"""

import os
import json
from unittest.mock import patch, mock_open

from config_manager import (
    ConfigManager,
    AppConfig,
    PersonalizationConfig,
    PathsConfig,
    get_app_config,
    get_personalization_config,
    get_paths_config,
)


class TestConfigManager:
    """Test the ConfigManager class functionality."""

    def test_defaults_when_file_missing(self, tmp_path):
        """Missing config file falls back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(tmp_path / "missing.json"))

        app_config = manager.get_app_config()
        assert app_config.host == "0.0.0.0"
        assert app_config.port == 3000
        assert app_config.debug is False
        assert app_config.partner_ids == ["nick", "nicki"]
        assert manager.get_personalization_config().min_ratings == 20
        assert manager.get_paths_config().catalog_file == "data/names.json"
        assert manager.get_paths_config().user_data_dir == "user_data"

    def test_file_values_merge_over_defaults(self, tmp_path):
        """A partial config file only replaces the keys it names."""
        config_file = tmp_path / "web_app_config.json"
        config_file.write_text(json.dumps({
            "app": {"port": 8080, "partner_ids": ["Alex", "Sam"]},
            "personalization": {"min_ratings": 5},
        }), encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))

        app_config = manager.get_app_config()
        assert app_config.port == 8080
        assert app_config.host == "0.0.0.0"
        assert app_config.partner_ids == ["alex", "sam"]
        assert manager.get_personalization_config().min_ratings == 5
        assert manager.get_paths_config().user_data_dir == "user_data"

    def test_invalid_json_keeps_defaults(self):
        """Corrupt config file is ignored."""
        with patch('builtins.open', mock_open(read_data="{not json")):
            with patch('config_manager.Path') as mock_path:
                mock_path.return_value.exists.return_value = True
                with patch.dict(os.environ, {}, clear=True):
                    manager = ConfigManager()

        assert manager.get_app_config().port == 3000
        assert manager.get_personalization_config().min_ratings == 20

    def test_override_with_env_variables(self, tmp_path):
        """Environment variables override file values."""
        config_file = tmp_path / "web_app_config.json"
        config_file.write_text(json.dumps({"app": {"host": "localhost", "port": 9000}}), encoding="utf-8")

        env_vars = {
            "APP_HOST": "127.0.0.1",
            "APP_PORT": "8081",
            "APP_DEBUG": "true",
            "PARTNER_IDS": " Ann, bo ,,",
            "PERSONALIZE_MIN_RATINGS": "10",
            "USER_DATA_DIR": "/var/lib/names",
            "CATALOG_FILE": "/etc/names.json",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            manager = ConfigManager(str(config_file))

        app_config = manager.get_app_config()
        assert app_config.host == "127.0.0.1"
        assert app_config.port == 8081
        assert app_config.debug is True
        assert app_config.partner_ids == ["ann", "bo"]
        assert manager.get_personalization_config().min_ratings == 10
        assert manager.get_paths_config().user_data_dir == "/var/lib/names"
        assert manager.get_paths_config().catalog_file == "/etc/names.json"

    def test_get_config_returns_copy(self, tmp_path):
        """Test getting raw configuration dictionary."""
        manager = ConfigManager(str(tmp_path / "missing.json"))

        config = manager.get_config()

        assert set(config) == {"app", "personalization", "paths"}
        assert config is not manager._config

    def test_save_and_reload(self, tmp_path):
        """Saved configuration is read back on reload."""
        config_file = tmp_path / "web_app_config.json"
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))
            manager._config["personalization"]["min_ratings"] = 7
            manager.save_config()

            manager._config["personalization"]["min_ratings"] = 99
            manager.reload()

        assert json.loads(config_file.read_text(encoding="utf-8"))["personalization"]["min_ratings"] == 7
        assert manager.get_personalization_config().min_ratings == 7


class TestConfigDataClasses:
    """Test the configuration data classes."""

    def test_app_config(self):
        config = AppConfig(host="localhost", port=8080, debug=True, partner_ids=["a", "b"])

        assert config.host == "localhost"
        assert config.port == 8080
        assert config.debug is True
        assert config.partner_ids == ["a", "b"]

    def test_personalization_config(self):
        assert PersonalizationConfig(min_ratings=3).min_ratings == 3

    def test_paths_config(self):
        config = PathsConfig(user_data_dir="user_data", catalog_file="data/names.json")

        assert config.user_data_dir == "user_data"
        assert config.catalog_file == "data/names.json"


class TestGlobalFunctions:
    """Test the global configuration functions."""

    def test_global_accessors(self):
        assert isinstance(get_app_config(), AppConfig)
        assert isinstance(get_personalization_config(), PersonalizationConfig)
        assert isinstance(get_paths_config(), PathsConfig)
