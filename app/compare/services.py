"""
Compare service: where both partners agree.
"""
from typing import Dict, List, Mapping

from name_service.progress import Rating
from app.user_progress.services import UserProgressService

LOVE = Rating.LOVE.value
MAYBE = Rating.MAYBE.value


def compare_ratings(first: Mapping[str, str], second: Mapping[str, str]) -> Dict[str, List[str]]:
    """Classify names rated by both partners.

    Names only one partner rated, or that either passed on, are left out.
    """
    both_loved: List[str] = []
    one_loved_one_maybe: List[str] = []
    both_maybe: List[str] = []

    for name in sorted(set(first) & set(second)):
        pair = {first[name], second[name]}
        if pair == {LOVE}:
            both_loved.append(name)
        elif pair == {LOVE, MAYBE}:
            one_loved_one_maybe.append(name)
        elif pair == {MAYBE}:
            both_maybe.append(name)

    return {
        "bothLoved": both_loved,
        "oneLovedOneMaybe": one_loved_one_maybe,
        "bothMaybe": both_maybe,
    }


class CompareService:
    """Compares the two partners' ratings."""

    def __init__(self, progress_service: UserProgressService):
        self.progress_service = progress_service

    def compare(self) -> Dict[str, List[str]]:
        records = list(self.progress_service.partner_progress().values())
        if len(records) < 2 or any(progress is None for progress in records[:2]):
            return {"bothLoved": [], "oneLovedOneMaybe": [], "bothMaybe": []}
        return compare_ratings(records[0].ratings, records[1].ratings)
