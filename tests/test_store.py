"""
Tests for progress records and the key-value stores behind them.
"""
import json
import threading

import pytest

from name_service.progress import CustomName, Phase, Rating, UserProgress, default_progress
from name_service.store import JsonFileStore, MemoryStore, ProgressRepository, user_key


class TestRating:
    """Test rating value validation."""

    def test_valid_ratings(self):
        for value in ["love", "maybe", "pass"]:
            assert Rating.is_valid(value)

    def test_invalid_ratings(self):
        for value in ["like", "LOVE", "", None, 3]:
            assert not Rating.is_valid(value)

    def test_get_allowed_values(self):
        assert Rating.get_allowed_values() == {"love", "maybe", "pass"}


class TestUserProgress:
    """Test the persisted progress record shape."""

    def test_default_progress(self):
        progress = default_progress(["Mia", "Zoe"])

        assert progress.current_index == 0
        assert progress.name_order == ["Mia", "Zoe"]
        assert progress.ratings == {}
        assert progress.custom_names == []
        assert progress.personalization_enabled is False
        assert progress.phase == Phase.FIRST
        assert progress.last_updated > 0

    def test_record_uses_camel_case_keys(self):
        progress = default_progress(["Mia"])
        progress.custom_names.append(CustomName(name="Wren", origin="English"))

        record = progress.to_record()

        assert record["currentIndex"] == 0
        assert record["nameOrder"] == ["Mia"]
        assert record["personalizationEnabled"] is False
        assert record["customNames"][0]["name"] == "Wren"
        assert record["phase"] == "first"
        assert "current_index" not in record
        json.dumps(record)

    def test_validate_from_client_record(self):
        record = {
            "currentIndex": 3,
            "nameOrder": ["A", "B", "C", "D"],
            "ratings": {"A": "love", "B": "pass", "C": "maybe"},
            "customNames": [],
            "personalizationEnabled": False,
            "lastUpdated": 1700000000000,
            "phase": "middle",
            "topFirstNames": ["A"],
            "middleNameRatings": {"A": {"Rose": "love"}},
        }

        progress = UserProgress.model_validate(record)

        assert progress.current_index == 3
        assert progress.rated_count == 3
        assert progress.phase == Phase.MIDDLE
        assert progress.middle_name_ratings == {"A": {"Rose": "love"}}
        assert progress.active_first_name is None

    def test_snake_case_field_names_accepted(self):
        assert UserProgress.model_config["populate_by_name"] is True

        progress = UserProgress.model_validate({"current_index": 4, "has_seen_tutorial": True})

        assert progress.current_index == 4
        assert progress.has_seen_tutorial is True

    def test_names_with_rating_follow_queue_order(self):
        progress = UserProgress(
            name_order=["C", "A", "B"],
            ratings={"A": "love", "B": "maybe", "C": "love", "Gone": "love"},
        )

        assert progress.names_with_rating(Rating.LOVE) == ["C", "A", "Gone"]
        assert progress.names_with_rating(Rating.MAYBE) == ["B"]
        assert progress.names_with_rating(Rating.PASS) == []


class TestMemoryStore:
    """Test the in-process store."""

    def test_get_set_delete(self):
        store = MemoryStore()

        assert store.get("k") is None
        store.set("k", {"a": 1})
        assert store.get("k") == {"a": 1}
        store.delete("k")
        assert store.get("k") is None

    def test_values_are_copied(self):
        store = MemoryStore()
        value = {"items": [1]}
        store.set("k", value)
        value["items"].append(2)

        fetched = store.get("k")
        fetched["items"].append(3)

        assert store.get("k") == {"items": [1]}

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            MemoryStore().set("  ", {})


class TestJsonFileStore:
    """Test the one-file-per-key store."""

    def test_round_trip_creates_file(self, tmp_path):
        store = JsonFileStore(tmp_path / "user_data")
        store.set("babynamer:nick", {"ratings": {"Mia": "love"}})

        assert store.get("babynamer:nick") == {"ratings": {"Mia": "love"}}
        files = list((tmp_path / "user_data").glob("*.json"))
        assert [f.name for f in files] == ["babynamer_nick.json"]

    def test_missing_and_corrupt_records_read_as_none(self, tmp_path):
        store = JsonFileStore(tmp_path)
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        (tmp_path / "listy.json").write_text("[1, 2]", encoding="utf-8")

        assert store.get("absent") is None
        assert store.get("broken") is None
        assert store.get("listy") is None

    def test_delete(self, tmp_path):
        store = JsonFileStore(tmp_path)
        store.set("k", {"a": 1})
        store.delete("k")
        store.delete("k")

        assert store.get("k") is None

    def test_no_temp_files_left_behind(self, tmp_path):
        store = JsonFileStore(tmp_path)
        store.set("k", {"a": 1})
        store.set("k", {"a": 2})

        assert store.get("k") == {"a": 2}
        assert [p.name for p in tmp_path.iterdir()] == ["k.json"]


class TestProgressRepository:
    """Test progress persistence on top of a store."""

    def test_user_key(self):
        assert user_key("Nick ") == "babynamer:nick"

    def test_load_missing_returns_none(self):
        repo = ProgressRepository(MemoryStore())

        assert repo.load("nick") is None

    def test_get_or_create_persists_once(self):
        repo = ProgressRepository(MemoryStore())
        calls = []

        def factory():
            calls.append(1)
            return default_progress(["Mia", "Zoe"])

        first = repo.get_or_create("nick", factory)
        second = repo.get_or_create("nick", factory)

        assert first.name_order == second.name_order == ["Mia", "Zoe"]
        assert len(calls) == 1

    def test_invalid_record_treated_as_missing(self):
        store = MemoryStore()
        store.set(user_key("nick"), {"currentIndex": "not a number"})
        repo = ProgressRepository(store)

        assert repo.load("nick") is None

    def test_update_missing_user(self):
        repo = ProgressRepository(MemoryStore())

        assert repo.update("nick", lambda progress: 1) == (None, None)

    def test_update_saves_changes(self):
        repo = ProgressRepository(MemoryStore())
        repo.save("nick", default_progress(["Mia"]))

        def _rate(progress):
            progress.ratings["Mia"] = "love"
            return "done"

        progress, result = repo.update("nick", _rate)

        assert result == "done"
        assert progress.ratings == {"Mia": "love"}
        assert repo.load("nick").ratings == {"Mia": "love"}

    def test_concurrent_updates_are_not_lost(self):
        repo = ProgressRepository(MemoryStore())
        names = [f"Name{i}" for i in range(40)]
        repo.save("nick", default_progress(names))

        def _rate(name):
            def _apply(progress):
                progress.ratings[name] = "maybe"
            repo.update("nick", _apply)

        threads = [threading.Thread(target=_rate, args=(name,)) for name in names]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(repo.load("nick").ratings) == 40
