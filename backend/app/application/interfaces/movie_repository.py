"""Abstract repository interface (port) for Movie persistence."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Movie


class MovieRepository(ABC):
    """Port for catalog persistence — implemented in the infrastructure layer.

    Every implementation must order listings by ``created_at`` descending,
    keep insertion order among equal timestamps, and apply each mutation
    atomically. Validation is the caller's job; fields are trusted as given.
    """

    @abstractmethod
    async def get_all(self, page: int = 1, page_size: int = 10) -> list[Movie]:
        """Retrieve one page of movies, newest first.

        Pages are 1-indexed. A page past the end yields an empty list.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of stored movies."""
        ...

    @abstractmethod
    async def get_by_id(self, movie_id: str) -> Movie | None:
        """Retrieve a single movie by its UUID, or None when absent."""
        ...

    @abstractmethod
    async def create(self, fields: dict[str, Any]) -> Movie:
        """Persist a new movie, assigning its id and timestamps."""
        ...

    @abstractmethod
    async def update(self, movie_id: str, changes: dict[str, Any]) -> Movie:
        """Merge ``changes`` into an existing movie.

        Raises EntityNotFoundError when ``movie_id`` is unknown.
        """
        ...

    @abstractmethod
    async def delete(self, movie_id: str) -> bool:
        """Delete a movie. Returns True if deleted, False if not found."""
        ...
