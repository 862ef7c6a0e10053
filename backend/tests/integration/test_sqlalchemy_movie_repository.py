"""Integration tests for the SQLAlchemy MovieRepository on SQLite (aiosqlite)."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import MovieType
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)
from app.infrastructure.database.repositories import SQLAlchemyMovieRepository


def _fields(title: str = "Dune") -> dict:
    return {
        "title": title,
        "type": MovieType.MOVIE,
        "director": "Denis Villeneuve",
        "budget": "$165M",
        "location": "Jordan",
        "duration": "155 min",
        "year_time": "2021",
    }


@pytest_asyncio.fixture
async def session(tmp_path) -> AsyncIterator[AsyncSession]:
    engine = build_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    await create_tables(engine)
    async with build_session_factory(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def repository(session: AsyncSession) -> SQLAlchemyMovieRepository:
    return SQLAlchemyMovieRepository(session)


@pytest.mark.asyncio
async def test_create_and_get_round_trip(repository):
    created = await repository.create(_fields())
    fetched = await repository.get_by_id(created.id)

    assert fetched is not None
    assert fetched.id == created.id
    assert fetched.type is MovieType.MOVIE
    assert fetched.year_time == "2021"
    assert fetched.created_at == fetched.updated_at
    assert fetched.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_get_all_pages_newest_first(repository):
    created = [await repository.create(_fields(f"T{i}")) for i in range(7)]

    walked = []
    for page in (1, 2, 3):
        walked.extend(await repository.get_all(page=page, page_size=3))

    assert sorted(m.id for m in walked) == sorted(m.id for m in created)
    stamps = [m.created_at for m in walked]
    assert stamps == sorted(stamps, reverse=True)
    assert await repository.get_all(page=4, page_size=3) == []
    assert await repository.count() == 7


@pytest.mark.asyncio
async def test_equal_timestamps_keep_insertion_order(repository, session):
    created = [await repository.create(_fields(f"T{i}")) for i in range(3)]
    for movie_id in (m.id for m in created):
        model = await repository._get_model(movie_id)
        model.created_at = created[0].created_at
    await session.flush()

    page = await repository.get_all(page=1, page_size=10)

    assert [m.id for m in page] == [m.id for m in created]


@pytest.mark.asyncio
async def test_update_merges_fields(repository):
    created = await repository.create(_fields())

    updated = await repository.update(created.id, {"type": MovieType.TV_SHOW, "duration": "8 episodes"})

    assert updated.type is MovieType.TV_SHOW
    assert updated.duration == "8 episodes"
    assert updated.title == "Dune"
    assert updated.updated_at >= created.updated_at
    assert updated.created_at == created.created_at


@pytest.mark.asyncio
async def test_update_unknown_id_raises(repository):
    with pytest.raises(EntityNotFoundError):
        await repository.update("5e0c4b6a-1111-4222-8333-944455556666", {"budget": "$1M"})


@pytest.mark.asyncio
async def test_delete_then_delete_again(repository):
    created = await repository.create(_fields())

    assert await repository.delete(created.id) is True
    assert await repository.delete(created.id) is False
    assert await repository.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_get_all_far_past_the_end_is_empty(repository):
    await repository.create(_fields())

    assert await repository.get_all(page=10**19, page_size=10) == []
