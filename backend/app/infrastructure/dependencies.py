"""FastAPI dependency injection — wires infrastructure to application layer.

The store is built once by the application factory and kept on
``app.state``: either ``movie_repository`` (in-memory backend) or
``session_factory`` (database backend, one session per request).
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from app.application.interfaces import MovieRepository
from app.application.services import MovieService
from app.infrastructure.database.repositories import SQLAlchemyMovieRepository


async def get_movie_repository(
    request: Request,
) -> AsyncGenerator[MovieRepository, None]:
    """Provides the request's MovieRepository.

    Database-backed requests run in a single transaction, committed when the
    endpoint returns and rolled back if it raises.
    """
    state = request.app.state
    session_factory = getattr(state, "session_factory", None)
    if session_factory is None:
        yield state.movie_repository
        return

    async with session_factory() as session:
        try:
            yield SQLAlchemyMovieRepository(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_movie_service(
    repository: MovieRepository = Depends(get_movie_repository),
) -> AsyncGenerator[MovieService, None]:
    """Provides a MovieService instance with its repository wired up."""
    yield MovieService(repository)
