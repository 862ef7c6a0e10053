from .base import Base
from .session import (
    build_engine,
    build_session_factory,
    create_tables,
    ensure_sqlite_directory,
    get_async_url,
)
from .models import MovieModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "ensure_sqlite_directory",
    "get_async_url",
    "MovieModel",
]
