"""
Partner validation and progress record access shared by every module.
"""
import logging
import random
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from pydantic import ValidationError

from name_service.catalog import NameCatalog
from name_service.progress import UserProgress, default_progress
from name_service.store import ProgressRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_USER = {"error": "Invalid user"}
USER_NOT_FOUND = {"error": "User not found"}
INVALID_BODY = {"error": "Request body must be a JSON object"}


class UserProgressService:
    """Service for partner identity and progress records."""

    def __init__(
        self,
        repository: ProgressRepository,
        catalog: NameCatalog,
        partner_ids: List[str],
        rng: Optional[random.Random] = None,
    ):
        self.repository = repository
        self.catalog = catalog
        self.partner_ids = [uid.strip().lower() for uid in partner_ids]
        self.rng = rng or random.Random()

    def normalize_partner(self, user: Optional[str]) -> Optional[str]:
        """Return the canonical partner id, or None if the user isn't a partner."""
        if not isinstance(user, str):
            return None
        uid = user.strip().lower()
        return uid if uid in self.partner_ids else None

    def require_partner_json(self, user: Optional[str]) -> Tuple[Optional[str], Optional[dict]]:
        """Validate a partner id for JSON endpoints, returning an error body if invalid."""
        uid = self.normalize_partner(user)
        if not uid:
            return None, INVALID_USER
        return uid, None

    def shuffled(self, names: List[str]) -> List[str]:
        shuffled = list(names)
        self.rng.shuffle(shuffled)
        return shuffled

    def get_progress(self, uid: str) -> Optional[UserProgress]:
        return self.repository.load(uid)

    def get_or_create_progress(self, uid: str) -> UserProgress:
        """Load the partner's record; first visit gets a freshly shuffled queue."""
        return self.repository.get_or_create(
            uid, lambda: default_progress(self.shuffled(self.catalog.names_list()))
        )

    def replace_progress(self, uid: str, raw: Dict[str, Any]) -> UserProgress:
        """Overwrite the stored record with one sent by a client.

        Raises:
            ValidationError: if the payload is not a valid progress record
        """
        progress = UserProgress.model_validate(raw)
        return self.repository.save(uid, progress)

    def update_progress(self, uid: str, fn: Callable[[UserProgress], T]) -> Tuple[Optional[UserProgress], Optional[T]]:
        return self.repository.update(uid, fn)

    def mark_tutorial_seen(self, uid: str) -> Optional[UserProgress]:
        def _mark(progress: UserProgress) -> None:
            progress.has_seen_tutorial = True

        progress, _ = self.update_progress(uid, _mark)
        return progress

    def partner_progress(self) -> Dict[str, Optional[UserProgress]]:
        """Progress records of every configured partner, None where missing."""
        return {uid: self.repository.load(uid) for uid in self.partner_ids}


def parse_progress_error(exc: ValidationError) -> str:
    """Short human-readable summary of a progress validation failure."""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid progress")
    return f"{location}: {message}" if location else message
