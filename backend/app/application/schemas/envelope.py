"""Response envelope shared by every catalog endpoint.

Success::

    {"status": true, "message": "...", "data": ..., "pagination": {...}}

Failure::

    {"status": false, "message": "...", "data": null, "errors": {"title": ["..."]}}
"""

import math
from typing import Generic, TypeVar

from app.application.schemas.movie import CamelModel

DataT = TypeVar("DataT")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class PaginationMeta(CamelModel):
    """Pagination metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    has_prev: bool


def calculate_pagination(page: int, limit: int, total: int) -> PaginationMeta:
    """Derive page count and neighbour flags for a listing."""
    pages = math.ceil(total / limit)
    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        pages=pages,
        has_next=page < pages,
        has_prev=page > 1,
    )


class ApiResponse(CamelModel, Generic[DataT]):
    """Envelope for single-entity (or empty) payloads."""

    status: bool = True
    message: str | None = None
    data: DataT


class PaginatedResponse(CamelModel, Generic[DataT]):
    """Envelope for one page of a listing."""

    status: bool = True
    message: str | None = None
    data: list[DataT]
    pagination: PaginationMeta


class ErrorResponse(CamelModel):
    """Envelope for every failed request."""

    status: bool = False
    message: str
    data: None = None
    errors: dict[str, list[str]] | None = None

    def to_content(self) -> dict:
        """JSON body for the response; ``errors`` only when there are any."""
        exclude = {"errors"} if self.errors is None else set()
        return self.model_dump(by_alias=True, exclude=exclude)
