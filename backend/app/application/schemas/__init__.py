from .movie import CamelModel, MovieCreate, MovieUpdate, MovieResponse
from .envelope import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApiResponse,
    ErrorResponse,
    PaginatedResponse,
    PaginationMeta,
    calculate_pagination,
)

__all__ = [
    "CamelModel",
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "ApiResponse",
    "ErrorResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "calculate_pagination",
]
