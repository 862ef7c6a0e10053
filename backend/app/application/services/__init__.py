from .movie_service import MoviePage, MovieService

__all__ = [
    "MoviePage",
    "MovieService",
]
