"""
Name catalog models and loading.

The catalog is fixed reference data: every candidate first name with its
origin, syllable count and descriptive fields, plus the middle-name list used
in the pairing phase. It is loaded once by the app factory and handed to each
module explicitly.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class BabyName(BaseModel):
    """A candidate first name."""
    name: str = Field(description="The name itself; unique within the catalog")
    origin: str = Field(default="", description="Origin, possibly slash-separated (e.g. 'Greek/Hebrew')")
    syllables: int = Field(default=1, ge=1, description="Number of spoken syllables")
    meaning: str = Field(default="", description="Short meaning of the name")
    phonetic: str = Field(default="", description="Pronunciation hint")
    nicknames: List[str] = Field(default_factory=list, description="Common short forms")
    rank: Optional[int] = Field(default=None, description="Popularity rank, if known")
    trend: Optional[str] = Field(default=None, description="Popularity trend, e.g. 'rising'")

    @property
    def origins(self) -> List[str]:
        """Origin tokens after splitting on '/'."""
        return split_origins(self.origin)


class MiddleName(BaseModel):
    """A candidate middle name."""
    name: str = Field(description="The middle name")
    origin: str = Field(default="", description="Origin of the name")
    meaning: str = Field(default="", description="Short meaning of the name")
    syllables: int = Field(default=1, ge=1, description="Number of spoken syllables")


def split_origins(origin: Optional[str]) -> List[str]:
    """Split an origin string like 'Greek/Hebrew' into trimmed tokens.

    Empty tokens are dropped, so "" and "Greek//" carry no empty origin.
    """
    if not origin:
        return []
    return [token.strip() for token in origin.split("/") if token.strip()]


class NameCatalog:
    """In-memory catalog of first and middle names."""

    def __init__(self, names: List[BabyName], middle_names: Optional[List[MiddleName]] = None):
        self.names = list(names)
        self.middle_names = list(middle_names or [])
        self._by_name: Dict[str, BabyName] = {}
        for entry in self.names:
            # First occurrence wins for duplicate names
            self._by_name.setdefault(entry.name, entry)

    @classmethod
    def from_dict(cls, data: dict) -> "NameCatalog":
        """Build a catalog from the JSON data file shape."""
        names = [BabyName.model_validate(item) for item in data.get("names", [])]
        middle_names = [MiddleName.model_validate(item) for item in data.get("middle_names", [])]
        return cls(names, middle_names)

    @classmethod
    def load(cls, catalog_file: Union[str, Path]) -> "NameCatalog":
        """Load the catalog from a JSON file.

        Args:
            catalog_file: Path to a file shaped {"names": [...], "middle_names": [...]}

        Returns:
            NameCatalog instance
        """
        path = Path(catalog_file)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        catalog = cls.from_dict(data)
        logger.info(
            "Loaded name catalog from %s: %d names, %d middle names",
            path, len(catalog.names), len(catalog.middle_names),
        )
        return catalog

    def get(self, name: str) -> Optional[BabyName]:
        return self._by_name.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self.names)

    def names_list(self) -> List[str]:
        """All first names in catalog order."""
        return [entry.name for entry in self.names]

    def middle_names_list(self) -> List[str]:
        """All middle names in catalog order."""
        return [entry.name for entry in self.middle_names]
