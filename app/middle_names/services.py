"""
Middle name phase: pair a few loved first names with middle names.

A partner picks 2-5 loved first names, then rates middle names in the
context of one active first name at a time.
"""
import logging
from typing import Dict, List, Optional

from name_service.catalog import NameCatalog
from name_service.progress import Phase, Rating, UserProgress
from app.user_progress.services import UserProgressService

logger = logging.getLogger(__name__)

MIN_FIRST_NAMES = 2
MAX_FIRST_NAMES = 5


class MiddlePhaseError(ValueError):
    """Raised when a middle-name request doesn't fit the partner's state."""


class MiddleNameService:
    """Drives the middle-name rating phase."""

    def __init__(self, progress_service: UserProgressService, catalog: NameCatalog):
        self.progress_service = progress_service
        self.catalog = catalog

    def start(self, uid: str, first_names: List[str]) -> Optional[UserProgress]:
        """Enter the middle-name phase for the chosen first names.

        Raises:
            MiddlePhaseError: if the selection size is wrong or a name isn't loved
        """
        selected: List[str] = []
        for name in first_names:
            if isinstance(name, str) and name.strip() and name.strip() not in selected:
                selected.append(name.strip())
        if not MIN_FIRST_NAMES <= len(selected) <= MAX_FIRST_NAMES:
            raise MiddlePhaseError(
                f"Select {MIN_FIRST_NAMES}-{MAX_FIRST_NAMES} first names"
            )

        middle_order = self.progress_service.shuffled(self.catalog.middle_names_list())

        def _start(progress: UserProgress) -> None:
            not_loved = [n for n in selected if progress.ratings.get(n) != Rating.LOVE.value]
            if not_loved:
                raise MiddlePhaseError(f"Not in your loved names: {', '.join(not_loved)}")
            progress.phase = Phase.MIDDLE
            progress.top_first_names = selected
            progress.middle_name_order = middle_order
            progress.middle_name_index = 0
            progress.middle_name_ratings = {}
            progress.active_first_name = selected[0]

        progress, _ = self.progress_service.update_progress(uid, _start)
        if progress is not None:
            logger.info("Started middle name phase for %s with %s", uid, selected)
        return progress

    def rate(self, uid: str, middle_name: str, rating: Rating) -> Optional[UserProgress]:
        """Rate a middle name for the active first name and advance.

        Raises:
            MiddlePhaseError: if the partner isn't in the middle-name phase
        """
        def _rate(progress: UserProgress) -> None:
            first = progress.active_first_name
            if progress.phase != Phase.MIDDLE or not first:
                raise MiddlePhaseError("Middle name phase has not started")
            progress.middle_name_ratings.setdefault(first, {})[middle_name] = rating.value
            progress.middle_name_index = min(
                progress.middle_name_index + 1, len(progress.middle_name_order)
            )

        progress, _ = self.progress_service.update_progress(uid, _rate)
        return progress

    def switch(self, uid: str, first_name: str) -> Optional[UserProgress]:
        """Make another of the chosen first names active and restart its queue.

        Raises:
            MiddlePhaseError: if the first name wasn't one of the chosen ones
        """
        def _switch(progress: UserProgress) -> None:
            if first_name not in progress.top_first_names:
                raise MiddlePhaseError(f"{first_name} is not one of your chosen first names")
            progress.active_first_name = first_name
            progress.middle_name_index = 0

        progress, _ = self.progress_service.update_progress(uid, _switch)
        return progress

    def pairings(self, uid: str) -> Optional[Dict[str, Dict[str, List[str]]]]:
        """Loved and maybe middle names for each chosen first name."""
        progress = self.progress_service.get_progress(uid)
        if progress is None:
            return None

        result: Dict[str, Dict[str, List[str]]] = {}
        for first in progress.top_first_names:
            ratings = progress.middle_name_ratings.get(first, {})
            result[first] = {
                "loved": [m for m, r in ratings.items() if r == Rating.LOVE.value],
                "maybe": [m for m, r in ratings.items() if r == Rating.MAYBE.value],
            }
        return result
