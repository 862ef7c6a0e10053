"""Concrete repository implementation for Movie backed by SQLAlchemy."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import MovieRepository
from app.domain.entities import Movie, MovieType
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.models import MovieModel


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyMovieRepository(MovieRepository):
    """Implements the MovieRepository port using SQLAlchemy async sessions.

    The session (and its transaction) is owned by the caller; this class
    only flushes.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Map ORM model → domain entity."""
        return Movie(
            id=model.id,
            title=model.title,
            type=MovieType(model.type),
            director=model.director,
            budget=model.budget,
            location=model.location,
            duration=model.duration,
            year_time=model.year_time,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    async def _get_model(self, movie_id: str) -> MovieModel | None:
        stmt = select(MovieModel).where(MovieModel.id == movie_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self, page: int = 1, page_size: int = 10) -> list[Movie]:
        skip = (page - 1) * page_size
        # Past the last row the page is empty; also keeps huge offsets
        # away from drivers limited to 64-bit integers.
        if skip >= await self.count():
            return []
        stmt = (
            select(MovieModel)
            .order_by(MovieModel.created_at.desc(), MovieModel.seq.asc())
            .offset(skip)
            .limit(page_size)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(MovieModel)
        )
        return result.scalar_one()

    async def get_by_id(self, movie_id: str) -> Movie | None:
        model = await self._get_model(movie_id)
        return self._to_entity(model) if model else None

    async def create(self, fields: dict[str, Any]) -> Movie:
        movie_id = str(uuid4())
        while await self._get_model(movie_id) is not None:
            movie_id = str(uuid4())
        now = datetime.now(timezone.utc)
        model = MovieModel(
            id=movie_id,
            title=fields["title"],
            type=MovieType(fields["type"]).value,
            director=fields["director"],
            budget=fields["budget"],
            location=fields["location"],
            duration=fields["duration"],
            year_time=fields["year_time"],
            created_at=now,
            updated_at=now,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, movie_id: str, changes: dict[str, Any]) -> Movie:
        model = await self._get_model(movie_id)
        if model is None:
            raise EntityNotFoundError("Movie", movie_id)
        movie = self._to_entity(model)
        movie.update(**changes)
        model.title = movie.title
        model.type = MovieType(movie.type).value
        model.director = movie.director
        model.budget = movie.budget
        model.location = movie.location
        model.duration = movie.duration
        model.year_time = movie.year_time
        model.updated_at = movie.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, movie_id: str) -> bool:
        model = await self._get_model(movie_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
