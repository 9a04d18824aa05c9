"""
Configuration management for the Baby Name Picker.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool
    partner_ids: list[str]


@dataclass
class PersonalizationConfig:
    """Personalization configuration settings."""
    min_ratings: int


@dataclass
class PathsConfig:
    """Path configuration settings."""
    user_data_dir: str
    catalog_file: str


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "web_app_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        self._config = self._get_default_config()

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError) as exc:
                # Keep default config if file is invalid or not found
                logger.warning("Ignoring config file %s: %s", self.config_file, exc)

        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 3000,
                "debug": False,
                "partner_ids": ["nick", "nicki"]
            },
            "personalization": {
                "min_ratings": 20
            },
            "paths": {
                "user_data_dir": "user_data",
                "catalog_file": "data/names.json"
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

        if os.getenv("PARTNER_IDS"):
            self._config["app"]["partner_ids"] = [
                uid.strip().lower() for uid in os.getenv("PARTNER_IDS").split(",") if uid.strip()
            ]

        if os.getenv("PERSONALIZE_MIN_RATINGS"):
            self._config["personalization"]["min_ratings"] = int(os.getenv("PERSONALIZE_MIN_RATINGS"))

        if os.getenv("USER_DATA_DIR"):
            self._config["paths"]["user_data_dir"] = os.getenv("USER_DATA_DIR")

        if os.getenv("CATALOG_FILE"):
            self._config["paths"]["catalog_file"] = os.getenv("CATALOG_FILE")

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"],
            partner_ids=[str(uid).strip().lower() for uid in app_config["partner_ids"]]
        )

    def get_personalization_config(self) -> PersonalizationConfig:
        """Get personalization configuration."""
        p_config = self._config["personalization"]
        return PersonalizationConfig(
            min_ratings=p_config["min_ratings"]
        )

    def get_paths_config(self) -> PathsConfig:
        """Get paths configuration."""
        paths_config = self._config["paths"]
        return PathsConfig(
            user_data_dir=paths_config["user_data_dir"],
            catalog_file=paths_config["catalog_file"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def get_personalization_config() -> PersonalizationConfig:
    """Get personalization configuration."""
    return config_manager.get_personalization_config()


def get_paths_config() -> PathsConfig:
    """Get paths configuration."""
    return config_manager.get_paths_config()
