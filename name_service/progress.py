"""
User progress models.

A partner's whole state lives in a single record: the shuffled name queue, how
far through it they are, every rating they've given, custom names they added,
and the middle-name phase. Keys are camelCase in storage and on the wire.
"""

import time
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Rating(str, Enum):
    """Allowed rating values for a name."""

    LOVE = "love"
    MAYBE = "maybe"
    PASS = "pass"

    @classmethod
    def is_valid(cls, value) -> bool:
        """Check if a rating string is valid."""
        try:
            cls(value)
            return True
        except ValueError:
            return False

    @classmethod
    def get_allowed_values(cls) -> set[str]:
        """Get all allowed rating strings."""
        return {r.value for r in cls}


class Phase(str, Enum):
    """Which list the partner is currently rating."""

    FIRST = "first"
    MIDDLE = "middle"


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class CustomName(BaseModel):
    """A name a partner added by hand."""
    name: str
    origin: Optional[str] = None
    meaning: Optional[str] = None
    phonetic: Optional[str] = None
    nicknames: List[str] = Field(default_factory=list)


class UserProgress(BaseModel):
    """Persisted per-partner progress record."""
    current_index: int = Field(default=0, alias="currentIndex")
    name_order: List[str] = Field(default_factory=list, alias="nameOrder")
    ratings: Dict[str, str] = Field(default_factory=dict)
    custom_names: List[CustomName] = Field(default_factory=list, alias="customNames")
    personalization_enabled: bool = Field(default=False, alias="personalizationEnabled")
    last_updated: int = Field(default_factory=now_ms, alias="lastUpdated")
    has_seen_tutorial: bool = Field(default=False, alias="hasSeenTutorial")

    # Middle name phase
    phase: Phase = Phase.FIRST
    top_first_names: List[str] = Field(default_factory=list, alias="topFirstNames")
    middle_name_ratings: Dict[str, Dict[str, str]] = Field(default_factory=dict, alias="middleNameRatings")
    middle_name_order: List[str] = Field(default_factory=list, alias="middleNameOrder")
    middle_name_index: int = Field(default=0, alias="middleNameIndex")
    active_first_name: Optional[str] = Field(default=None, alias="activeFirstName")

    model_config = ConfigDict(populate_by_name=True)  # Accept snake_case names in Python code

    def to_record(self) -> dict:
        """Serialize to the stored/wire JSON shape."""
        return self.model_dump(mode="json", by_alias=True)

    @property
    def rated_count(self) -> int:
        return len(self.ratings)

    def names_with_rating(self, rating: Rating) -> List[str]:
        """Names carrying the given rating, in queue order.

        Rated names missing from the queue (e.g. after a client sync) are
        appended in rating order.
        """
        value = rating.value
        ordered = [name for name in self.name_order if self.ratings.get(name) == value]
        seen = set(ordered)
        for name, given in self.ratings.items():
            if given == value and name not in seen:
                ordered.append(name)
                seen.add(name)
        return ordered


def default_progress(name_order: List[str]) -> UserProgress:
    """Fresh progress record for a first-time partner."""
    return UserProgress(
        current_index=0,
        name_order=list(name_order),
        ratings={},
        custom_names=[],
        personalization_enabled=False,
        last_updated=now_ms(),
    )
