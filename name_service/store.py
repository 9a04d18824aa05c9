"""
Key-value storage for per-partner progress records.

The application only needs get/set by string key. `JsonFileStore` keeps one
JSON file per key in the user data directory; `MemoryStore` backs tests.
`ProgressRepository` layers the progress record on top and serializes
read-modify-write cycles so two devices updating the same partner do not lose
each other's changes.
"""

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from threading import Lock, RLock
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar

from pydantic import ValidationError

from .progress import UserProgress, now_ms

logger = logging.getLogger(__name__)

KEY_PREFIX = "babynamer"

T = TypeVar("T")

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class KeyValueStore(Protocol):
    """Minimal key-value store interface."""

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the stored value or None."""

    def set(self, key: str, value: Dict[str, Any]) -> None:
        """Store a JSON-serializable value."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""


def _check_key(key: str) -> str:
    if not key or not key.strip():
        raise ValueError("Store key cannot be empty")
    return key


class MemoryStore:
    """Dict-backed store, one process only."""

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        _check_key(key)
        with self._lock:
            raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        _check_key(key)
        # Round-trip through JSON so callers can't share mutable state with the store
        raw = json.dumps(value, ensure_ascii=False)
        with self._lock:
            self._data[key] = raw

    def delete(self, key: str) -> None:
        _check_key(key)
        with self._lock:
            self._data.pop(key, None)


class JsonFileStore:
    """One JSON file per key inside a directory."""

    def __init__(self, data_dir: Path):
        """Initialize the store.

        Args:
            data_dir: Directory where the JSON files are kept
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        safe = _UNSAFE_KEY_CHARS.sub("_", _check_key(key))
        return self.data_dir / f"{safe}.json"

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        path = self._path(key)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except json.JSONDecodeError as exc:
            logger.warning("Corrupt record for key %s at %s: %s", key, path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Unexpected record type for key %s: %s", key, type(data).__name__)
            return None
        return data

    def set(self, key: str, value: Dict[str, Any]) -> None:
        path = self._path(key)
        # Write to a temp file first so readers never see a half-written record
        fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def user_key(user: str) -> str:
    """Storage key for a partner's progress record."""
    return f"{KEY_PREFIX}:{(user or '').strip().lower()}"


class ProgressRepository:
    """Load and persist `UserProgress` records through a key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._lock = RLock()

    def load(self, user: str) -> Optional[UserProgress]:
        """Load a partner's progress, or None when there is no usable record."""
        data = self.store.get(user_key(user))
        if data is None:
            return None
        try:
            return UserProgress.model_validate(data)
        except ValidationError as exc:
            logger.warning("Discarding invalid progress record for %s: %s", user, exc)
            return None

    def save(self, user: str, progress: UserProgress) -> UserProgress:
        """Persist a partner's progress, stamping lastUpdated."""
        progress.last_updated = now_ms()
        with self._lock:
            self.store.set(user_key(user), progress.to_record())
        return progress

    def get_or_create(self, user: str, factory: Callable[[], UserProgress]) -> UserProgress:
        """Load the record, creating and persisting one from `factory` if absent."""
        with self._lock:
            progress = self.load(user)
            if progress is None:
                progress = self.save(user, factory())
                logger.info("Created progress record for %s (%d names)", user, len(progress.name_order))
            return progress

    def update(self, user: str, fn: Callable[[UserProgress], T]) -> tuple[Optional[UserProgress], Optional[T]]:
        """Read-modify-write a partner's record under the repository lock.

        Args:
            user: Partner id
            fn: Mutates the progress in place and returns a result for the caller

        Returns:
            (progress, result), or (None, None) when the partner has no record
        """
        with self._lock:
            progress = self.load(user)
            if progress is None:
                return None, None
            result = fn(progress)
            self.save(user, progress)
            return progress, result
