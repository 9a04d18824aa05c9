"""
Custom name service: partners can add names that aren't in the catalog.
"""
import logging
from typing import List, Optional

from name_service.progress import CustomName, UserProgress
from app.user_progress.services import UserProgressService

logger = logging.getLogger(__name__)


def _clean(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip()


class CustomNameService:
    """Adds custom names to a partner's queue."""

    def __init__(self, progress_service: UserProgressService):
        self.progress_service = progress_service

    def add_name(
        self,
        uid: str,
        name: str,
        origin: Optional[str] = None,
        meaning: Optional[str] = None,
        phonetic: Optional[str] = None,
        nicknames: Optional[List[str]] = None,
    ) -> Optional[UserProgress]:
        """Add a custom name right at the partner's current position.

        Returns:
            The updated progress, or None if the partner has no record
        """
        name = name.strip()
        custom = CustomName(
            name=name,
            origin=_clean(origin),
            meaning=_clean(meaning),
            phonetic=_clean(phonetic),
            nicknames=[n.strip() for n in nicknames or [] if isinstance(n, str) and n.strip()],
        )

        def _add(progress: UserProgress) -> None:
            progress.custom_names.append(custom)
            insert_at = min(max(progress.current_index, 0), len(progress.name_order))
            progress.name_order.insert(insert_at, name)

        progress, _ = self.progress_service.update_progress(uid, _add)
        if progress is not None:
            logger.info("Added custom name %r for %s", name, uid)
        return progress
