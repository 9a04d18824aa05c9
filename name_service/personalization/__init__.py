"""
Personalization package for reordering a partner's name queue.

Provides a swappable ranker that the web layer, scripts, or any future batch
jobs can use without creating Flask dependencies.
"""

from .engine import (
    DEFAULT_MIN_RATINGS,
    HeuristicRanker,
    NameRanker,
    PersonalizationGate,
    PreferenceProfile,
    analyze_patterns,
    build_default_ranker,
    get_ending,
    length_bucket,
    reorder,
    score_name,
)

__all__ = [
    "DEFAULT_MIN_RATINGS",
    "HeuristicRanker",
    "NameRanker",
    "PersonalizationGate",
    "PreferenceProfile",
    "analyze_patterns",
    "build_default_ranker",
    "get_ending",
    "length_bucket",
    "reorder",
    "score_name",
]
