"""In-process repository implementation for Movie — the default store."""

import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from app.application.interfaces import MovieRepository
from app.domain.entities import Movie
from app.domain.exceptions import EntityNotFoundError


class InMemoryMovieRepository(MovieRepository):
    """Implements the MovieRepository port with an insertion-ordered dict.

    Mutations run under an ``asyncio.Lock`` so no reader observes a
    half-applied write. Returned entities are copies; the dict holds the
    only authoritative instances.
    """

    def __init__(self) -> None:
        self._movies: dict[str, Movie] = {}
        self._lock = asyncio.Lock()

    async def get_all(self, page: int = 1, page_size: int = 10) -> list[Movie]:
        # sorted() is stable with reverse=True, so equal timestamps keep
        # their insertion order.
        ordered = sorted(
            self._movies.values(), key=lambda m: m.created_at, reverse=True
        )
        skip = (page - 1) * page_size
        return [replace(m) for m in ordered[skip : skip + page_size]]

    async def count(self) -> int:
        return len(self._movies)

    async def get_by_id(self, movie_id: str) -> Movie | None:
        movie = self._movies.get(movie_id)
        return replace(movie) if movie else None

    async def create(self, fields: dict[str, Any]) -> Movie:
        async with self._lock:
            movie_id = str(uuid4())
            while movie_id in self._movies:
                movie_id = str(uuid4())
            now = datetime.now(timezone.utc)
            movie = Movie(id=movie_id, created_at=now, updated_at=now, **fields)
            self._movies[movie_id] = movie
            return replace(movie)

    async def update(self, movie_id: str, changes: dict[str, Any]) -> Movie:
        async with self._lock:
            existing = self._movies.get(movie_id)
            if existing is None:
                raise EntityNotFoundError("Movie", movie_id)
            merged = replace(existing)
            merged.update(**changes)
            # Re-assigning an existing key keeps its insertion position.
            self._movies[movie_id] = merged
            return replace(merged)

    async def delete(self, movie_id: str) -> bool:
        async with self._lock:
            return self._movies.pop(movie_id, None) is not None
