"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
    ensure_sqlite_directory,
)
from app.infrastructure.logging import setup_logging
from app.infrastructure.memory import InMemoryMovieRepository
from app.presentation.api.error_handlers import register_exception_handlers
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _configure_storage(app: FastAPI, settings: Settings) -> None:
    """Build the movie store once and attach it to ``app.state``."""
    if settings.storage_backend == "database":
        engine = build_engine(settings.database_url, echo=settings.database_echo)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
    else:
        app.state.movie_repository = InMemoryMovieRepository()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, prepare and release the store."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    engine = getattr(app.state, "engine", None)
    if engine is not None:
        ensure_sqlite_directory(settings.database_url)
        await create_tables(engine)
        logger.info("Movie store ready: database (%s)", engine.url.render_as_string())
    else:
        logger.info("Movie store ready: in-memory")

    yield

    # Shutdown
    if engine is not None:
        await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    _configure_storage(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
    )
