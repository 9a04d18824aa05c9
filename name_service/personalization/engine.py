"""
Personalized ordering of a partner's name queue.

Lives inside name_service/ so it has no Flask dependency. The heuristic
ranker infers a taste profile (syllables, origins, endings, length) from loved
and passed names and moves likely favourites to the front of the unrated part
of the queue. Anything implementing `NameRanker` can replace it.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

from ..catalog import BabyName, split_origins
from ..progress import Rating, UserProgress

logger = logging.getLogger(__name__)

DEFAULT_MIN_RATINGS = 20

SHORT = "short"
MEDIUM = "medium"
LONG = "long"


# ---------------------------------------------------------------------------
# Core data structures
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class PreferenceProfile:
    """Taste summary derived from one partner's ratings. Never persisted."""

    preferred_syllables: List[int] = field(default_factory=list)
    preferred_origins: List[str] = field(default_factory=list)
    preferred_endings: List[str] = field(default_factory=list)
    avoided_endings: List[str] = field(default_factory=list)
    preferred_length: str = SHORT

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


class NameRanker(Protocol):
    """Interface for anything that can reorder a name queue."""

    name: str

    def reorder(
        self,
        catalog: Sequence[BabyName],
        ratings: Mapping[str, str],
        current_order: Sequence[str],
    ) -> List[str]:
        """Return a new ordering: rated names first, then unrated names ranked."""


# ---------------------------------------------------------------------------
# Feature helpers
# ---------------------------------------------------------------------------


def get_ending(name: str) -> str:
    """Last two characters, lowercased; the whole name when shorter."""
    return name[-2:].lower()


def length_bucket(length: float) -> str:
    if length < 5:
        return SHORT
    if length < 7:
        return MEDIUM
    return LONG


def _top(tally: Dict, limit: int, positive_only: bool = False) -> List:
    # sorted() is stable, so equal scores keep first-tallied order
    ranked = sorted(tally.items(), key=lambda item: item[1], reverse=True)
    if positive_only:
        ranked = [item for item in ranked if item[1] > 0]
    return [key for key, _ in ranked[:limit]]


# ---------------------------------------------------------------------------
# Pattern analysis and scoring
# ---------------------------------------------------------------------------


def analyze_patterns(catalog: Iterable[BabyName], ratings: Mapping[str, str]) -> PreferenceProfile:
    """Derive a preference profile from loved and passed catalog names.

    Maybe-rated and unrated names carry no signal. Syllable counts are ranked
    without a positive filter while origins must have a positive net score.
    """
    loved: List[BabyName] = []
    passed: List[BabyName] = []
    for entry in catalog:
        rating = ratings.get(entry.name)
        if rating == Rating.LOVE.value:
            loved.append(entry)
        elif rating == Rating.PASS.value:
            passed.append(entry)

    syllable_scores: Dict[int, float] = {}
    for entry in loved:
        syllable_scores[entry.syllables] = syllable_scores.get(entry.syllables, 0.0) + 1
    for entry in passed:
        syllable_scores[entry.syllables] = syllable_scores.get(entry.syllables, 0.0) - 0.5

    origin_scores: Dict[str, float] = {}
    for entry in loved:
        for origin in split_origins(entry.origin):
            origin_scores[origin] = origin_scores.get(origin, 0.0) + 1
    for entry in passed:
        for origin in split_origins(entry.origin):
            origin_scores[origin] = origin_scores.get(origin, 0.0) - 0.5

    loved_endings: Dict[str, int] = {}
    for entry in loved:
        ending = get_ending(entry.name)
        loved_endings[ending] = loved_endings.get(ending, 0) + 1
    passed_endings: Dict[str, int] = {}
    for entry in passed:
        ending = get_ending(entry.name)
        passed_endings[ending] = passed_endings.get(ending, 0) + 1

    preferred_endings = _top(loved_endings, 3)
    avoided_candidates = {e: c for e, c in passed_endings.items() if e not in preferred_endings}

    mean_length = sum(len(entry.name) for entry in loved) / len(loved) if loved else 0

    return PreferenceProfile(
        preferred_syllables=_top(syllable_scores, 2),
        preferred_origins=_top(origin_scores, 4, positive_only=True),
        preferred_endings=preferred_endings,
        avoided_endings=_top(avoided_candidates, 3),
        preferred_length=length_bucket(mean_length),
    )


def score_name(entry: BabyName, profile: PreferenceProfile) -> int:
    """Additive point score of one name against a profile. Can be negative."""
    score = 0

    if entry.syllables in profile.preferred_syllables:
        score += 3

    for origin in split_origins(entry.origin):
        if origin in profile.preferred_origins:
            score += 2

    ending = get_ending(entry.name)
    if ending in profile.preferred_endings:
        score += 2
    if ending in profile.avoided_endings:
        score -= 2

    if length_bucket(len(entry.name)) == profile.preferred_length:
        score += 1

    return score


# ---------------------------------------------------------------------------
# Rankers
# ---------------------------------------------------------------------------


class HeuristicRanker:
    """Ranks unrated names by how well they match the partner's taste profile."""

    name = "heuristic"

    def reorder(
        self,
        catalog: Sequence[BabyName],
        ratings: Mapping[str, str],
        current_order: Sequence[str],
    ) -> List[str]:
        rated = [name for name in current_order if name in ratings]
        unrated = [name for name in current_order if name not in ratings]

        profile = analyze_patterns(catalog, ratings)
        by_name: Dict[str, BabyName] = {}
        for entry in catalog:
            by_name.setdefault(entry.name, entry)

        # Custom names aren't in the catalog; they score 0 and keep their slot among ties
        scores = {
            name: score_name(by_name[name], profile) if name in by_name else 0
            for name in unrated
        }
        ranked = sorted(unrated, key=lambda name: scores[name], reverse=True)

        logger.debug(
            "Reordered %d unrated names (%d rated) with profile %s",
            len(ranked), len(rated), profile,
        )
        return rated + ranked


class PersonalizationGate:
    """Caller-side rule deciding when a queue may be reordered.

    The ranker itself runs on any input; this gate is what keeps partners with
    too few ratings on their original order and fires only once per partner.
    """

    def __init__(self, min_ratings: int = DEFAULT_MIN_RATINGS):
        self.min_ratings = max(0, min_ratings)

    def has_enough_ratings(self, ratings: Mapping[str, str]) -> bool:
        return len(ratings) >= self.min_ratings

    def is_open(self, progress: UserProgress) -> bool:
        """True when the partner qualifies and hasn't been personalized yet."""
        return self.has_enough_ratings(progress.ratings) and not progress.personalization_enabled

    def reorder(
        self,
        ranker: NameRanker,
        catalog: Sequence[BabyName],
        ratings: Mapping[str, str],
        current_order: Sequence[str],
    ) -> List[str]:
        """Run the ranker, or pass the order through when under the threshold."""
        if not self.has_enough_ratings(ratings):
            return list(current_order)
        return ranker.reorder(catalog, ratings, current_order)

    def apply(self, ranker: NameRanker, catalog: Sequence[BabyName], progress: UserProgress) -> bool:
        """Reorder a progress record in place.

        Returns:
            True if the queue was personalized, False if the gate was closed
        """
        if not self.has_enough_ratings(progress.ratings):
            return False
        progress.name_order = ranker.reorder(catalog, progress.ratings, progress.name_order)
        progress.personalization_enabled = True
        return True


def build_default_ranker() -> HeuristicRanker:
    """Factory for the ranker used by the web app."""
    return HeuristicRanker()


def reorder(
    catalog: Sequence[BabyName],
    ratings: Mapping[str, str],
    current_order: Sequence[str],
    ranker: Optional[NameRanker] = None,
) -> List[str]:
    """Convenience wrapper: reorder with the default ranker, no gate applied."""
    return (ranker or build_default_ranker()).reorder(catalog, ratings, current_order)
