from .movie_repository import InMemoryMovieRepository

__all__ = [
    "InMemoryMovieRepository",
]
