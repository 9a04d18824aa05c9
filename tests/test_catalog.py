"""
Tests for the name catalog models and loader.
"""
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from name_service.catalog import BabyName, MiddleName, NameCatalog, split_origins

CATALOG_FILE = Path(__file__).parent.parent / "data" / "names.json"


class TestSplitOrigins:

    def test_single_and_multi_origin(self):
        assert split_origins("Latin") == ["Latin"]
        assert split_origins("Greek/Hebrew") == ["Greek", "Hebrew"]
        assert split_origins(" Irish / Latin ") == ["Irish", "Latin"]

    def test_empty_tokens_dropped(self):
        assert split_origins("") == []
        assert split_origins(None) == []
        assert split_origins("Greek//") == ["Greek"]

    def test_origins_property(self):
        assert BabyName(name="Nora", origin="Irish/Latin", syllables=2).origins == ["Irish", "Latin"]


class TestBabyName:

    def test_defaults(self):
        entry = BabyName(name="Wren")

        assert entry.origin == ""
        assert entry.syllables == 1
        assert entry.nicknames == []
        assert entry.rank is None

    def test_syllables_must_be_positive(self):
        with pytest.raises(ValidationError):
            BabyName(name="Wren", syllables=0)


class TestNameCatalog:

    def test_load_bundled_catalog(self):
        catalog = NameCatalog.load(CATALOG_FILE)

        assert len(catalog) == 60
        assert len(catalog.middle_names) == 20
        assert "Mia" in catalog
        assert catalog.get("Mia").origin == "Italian"
        assert catalog.get("Isabella").origins == ["Hebrew", "Italian"]
        assert catalog.get("Nobody") is None

    def test_bundled_names_are_unique(self):
        catalog = NameCatalog.load(CATALOG_FILE)

        assert len(set(catalog.names_list())) == len(catalog.names_list())
        assert len(set(catalog.middle_names_list())) == len(catalog.middle_names_list())

    def test_from_dict_keeps_order(self):
        catalog = NameCatalog.from_dict({
            "names": [{"name": "B", "syllables": 1}, {"name": "A", "syllables": 2}],
            "middle_names": [{"name": "Rose"}],
        })

        assert catalog.names_list() == ["B", "A"]
        assert catalog.middle_names_list() == ["Rose"]
        assert isinstance(catalog.middle_names[0], MiddleName)

    def test_duplicate_names_first_wins(self):
        catalog = NameCatalog([BabyName(name="Ava", origin="Latin"), BabyName(name="Ava", origin="Hebrew")])

        assert catalog.get("Ava").origin == "Latin"
        assert len(catalog) == 2

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "names.json"
        path.write_text(json.dumps({"names": [{"name": "Ivy", "origin": "English", "syllables": 2}]}), encoding="utf-8")

        catalog = NameCatalog.load(path)

        assert catalog.names_list() == ["Ivy"]
        assert catalog.middle_names == []

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            NameCatalog.load(tmp_path / "nope.json")
