"""Domain entity — pure Python business object for catalog entries."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class MovieType(str, Enum):
    """Kinds of catalog entries."""

    MOVIE = "Movie"
    TV_SHOW = "TV Show"


# Fields a caller may set; id and timestamps belong to the store.
EDITABLE_FIELDS = (
    "title",
    "type",
    "director",
    "budget",
    "location",
    "duration",
    "year_time",
)


@dataclass
class Movie:
    """Core domain entity for a movie or TV show in the catalog."""

    id: str
    title: str
    type: MovieType
    director: str
    budget: str
    location: str
    duration: str
    year_time: str
    created_at: datetime
    updated_at: datetime

    def update(self, **changes: Any) -> None:
        """Merge the supplied fields and refresh the updated_at timestamp.

        ``updated_at`` never moves backwards, even if the wall clock does.
        """
        for name, value in changes.items():
            if name not in EDITABLE_FIELDS:
                raise AttributeError(f"Movie field '{name}' is not editable")
            setattr(self, name, value)
        self.updated_at = max(datetime.now(timezone.utc), self.updated_at)
