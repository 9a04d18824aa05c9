"""Ratings service logic: set, undo and shortlist."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from name_service.personalization import PersonalizationGate
from name_service.progress import Rating, UserProgress
from app.user_progress.services import UserProgressService

logger = logging.getLogger(__name__)


@dataclass
class RatingResult:
    """Outcome of a rating change."""
    current_index: int
    personalization_due: bool = False

    def to_dict(self) -> dict:
        return {
            "ok": True,
            "currentIndex": self.current_index,
            "personalizationDue": self.personalization_due,
        }


class RatingService:
    """Applies rating changes to a partner's progress record."""

    def __init__(self, progress_service: UserProgressService, gate: PersonalizationGate):
        self.progress_service = progress_service
        self.gate = gate

    def set_rating(self, uid: str, name: str, rating: Rating) -> Optional[RatingResult]:
        """Record a rating and advance the queue. None if the partner has no record."""
        def _rate(progress: UserProgress) -> RatingResult:
            progress.ratings[name] = rating.value
            progress.current_index = min(progress.current_index + 1, len(progress.name_order))
            return RatingResult(
                current_index=progress.current_index,
                personalization_due=self.gate.is_open(progress),
            )

        _, result = self.progress_service.update_progress(uid, _rate)
        if result and result.personalization_due:
            logger.info("Personalization gate open for %s", uid)
        return result

    def undo_rating(self, uid: str, name: str) -> Optional[RatingResult]:
        """Remove a rating and step the queue back one place."""
        def _undo(progress: UserProgress) -> RatingResult:
            progress.ratings.pop(name, None)
            progress.current_index = max(progress.current_index - 1, 0)
            return RatingResult(current_index=progress.current_index)

        _, result = self.progress_service.update_progress(uid, _undo)
        return result

    def shortlist(self, uid: str) -> Optional[Dict[str, List[str]]]:
        progress = self.progress_service.get_progress(uid)
        if progress is None:
            return None
        return {
            "loved": progress.names_with_rating(Rating.LOVE),
            "maybe": progress.names_with_rating(Rating.MAYBE),
        }
