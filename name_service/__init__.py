# Name service package: catalog, progress records, storage and personalization

from .catalog import BabyName, MiddleName, NameCatalog, split_origins
from .progress import (
    CustomName,
    Phase,
    Rating,
    UserProgress,
    default_progress,
)
from .store import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    ProgressRepository,
    user_key,
)
from .logging_config import (
    setup_logging,
    stop_logging,
    get_logger,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "BabyName",
    "MiddleName",
    "NameCatalog",
    "split_origins",
    "CustomName",
    "Phase",
    "Rating",
    "UserProgress",
    "default_progress",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "ProgressRepository",
    "user_key",
    "setup_logging",
    "stop_logging",
    "get_logger",
    "ThreadSafeLoggingConfig",
]
