"""Shared fixtures: isolated apps, HTTP clients and sample payloads."""

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.database import create_tables
from app.main import create_app


class FakeClock:
    """Stand-in for ``datetime`` whose ``now()`` advances by a fixed step."""

    def __init__(self, step: timedelta = timedelta(seconds=1)):
        self.current = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def now(self, tz=None) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def movie_payload() -> dict:
    return {
        "title": "Dune",
        "type": "Movie",
        "director": "Denis Villeneuve",
        "budget": "$165M",
        "location": "Jordan",
        "duration": "155 min",
        "yearTime": "2021",
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def db_client(tmp_path) -> AsyncIterator[AsyncClient]:
    """Client for an app backed by a throwaway SQLite database."""
    settings = Settings(
        _env_file=None,
        storage_backend="database",
        database_url=f"sqlite:///{tmp_path / 'movies.db'}",
    )
    app = create_app(settings)
    await create_tables(app.state.engine)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    await app.state.engine.dispose()


@pytest.fixture
def install_clock(monkeypatch):
    """Replace the clock used by the in-memory store and the Movie entity."""

    def install(step: timedelta = timedelta(seconds=1)) -> FakeClock:
        clock = FakeClock(step)
        monkeypatch.setattr(
            "app.infrastructure.memory.movie_repository.datetime", clock
        )
        monkeypatch.setattr("app.domain.entities.movie.datetime", clock)
        return clock

    return install
