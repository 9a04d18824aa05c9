"""
Personalization service: applies the ranker to a partner's stored queue.
"""
import logging
from enum import Enum
from typing import Optional

from name_service.catalog import NameCatalog
from name_service.personalization import NameRanker, PersonalizationGate, PreferenceProfile, analyze_patterns
from name_service.progress import UserProgress
from app.user_progress.services import UserProgressService

logger = logging.getLogger(__name__)


class PersonalizeOutcome(Enum):
    """Result of a personalize request."""
    PERSONALIZED = "personalized"
    NOT_ENOUGH_RATINGS = "not_enough_ratings"
    USER_NOT_FOUND = "user_not_found"


class PersonalizationService:
    """Reorders a partner's remaining names once the gate allows it."""

    def __init__(
        self,
        progress_service: UserProgressService,
        catalog: NameCatalog,
        ranker: NameRanker,
        gate: PersonalizationGate,
    ):
        self.progress_service = progress_service
        self.catalog = catalog
        self.ranker = ranker
        self.gate = gate

    def personalize(self, uid: str) -> PersonalizeOutcome:
        """Reorder and persist the partner's queue."""
        def _apply(progress: UserProgress) -> bool:
            return self.gate.apply(self.ranker, self.catalog.names, progress)

        # Check first so an under-threshold request doesn't rewrite the record
        progress = self.progress_service.get_progress(uid)
        if progress is None:
            return PersonalizeOutcome.USER_NOT_FOUND
        if not self.gate.has_enough_ratings(progress.ratings):
            return PersonalizeOutcome.NOT_ENOUGH_RATINGS

        progress, applied = self.progress_service.update_progress(uid, _apply)
        if progress is None:
            return PersonalizeOutcome.USER_NOT_FOUND
        if not applied:
            return PersonalizeOutcome.NOT_ENOUGH_RATINGS

        logger.info(
            "Personalized queue for %s using %s ranker (%d ratings)",
            uid, self.ranker.name, progress.rated_count,
        )
        return PersonalizeOutcome.PERSONALIZED

    def profile(self, uid: str) -> Optional[PreferenceProfile]:
        progress = self.progress_service.get_progress(uid)
        if progress is None:
            return None
        return analyze_patterns(self.catalog.names, progress.ratings)
