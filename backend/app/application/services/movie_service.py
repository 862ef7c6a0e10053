"""Application service (use case) for Movie operations."""

import logging
from dataclasses import dataclass

from app.application.interfaces import MovieRepository
from app.application.schemas import (
    MovieCreate,
    MovieUpdate,
    PaginationMeta,
    calculate_pagination,
)
from app.domain.entities import Movie
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class MoviePage:
    """One page of the catalog together with its pagination metadata."""

    items: list[Movie]
    pagination: PaginationMeta


class MovieService:
    """Orchestrates catalog CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: MovieRepository):
        self._repository = repository

    async def get_movie(self, movie_id: str) -> Movie:
        movie = await self._repository.get_by_id(movie_id)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)
        return movie

    async def list_movies(self, page: int = 1, limit: int = 10) -> MoviePage:
        items = await self._repository.get_all(page=page, page_size=limit)
        total = await self._repository.count()
        return MoviePage(
            items=items,
            pagination=calculate_pagination(page, limit, total),
        )

    async def create_movie(self, data: MovieCreate) -> Movie:
        movie = await self._repository.create(data.model_dump())
        logger.info("Created movie %s (%r)", movie.id, movie.title)
        return movie

    async def update_movie(self, movie_id: str, data: MovieUpdate) -> Movie:
        await self.get_movie(movie_id)
        changes = data.changes()
        movie = await self._repository.update(movie_id, changes)
        logger.info("Updated movie %s: %s", movie_id, ", ".join(sorted(changes)))
        return movie

    async def delete_movie(self, movie_id: str) -> bool:
        exists = await self._repository.get_by_id(movie_id)
        if exists is None:
            raise EntityNotFoundError("Movie", movie_id)
        deleted = await self._repository.delete(movie_id)
        logger.info("Deleted movie %s", movie_id)
        return deleted
