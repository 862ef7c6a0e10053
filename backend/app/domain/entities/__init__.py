from .movie import EDITABLE_FIELDS, Movie, MovieType

__all__ = [
    "EDITABLE_FIELDS",
    "Movie",
    "MovieType",
]
