"""Movie catalog CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from app.application.schemas import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApiResponse,
    ErrorResponse,
    MovieCreate,
    MovieResponse,
    MovieUpdate,
    PaginatedResponse,
)
from app.application.services import MovieService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_movie_service

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=PaginatedResponse[MovieResponse])
async def list_movies(
    page: int = Query(1, ge=1, description="1-indexed page number"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    service: MovieService = Depends(get_movie_service),
) -> PaginatedResponse[MovieResponse]:
    """Retrieve one page of the catalog, newest first."""
    result = await service.list_movies(page=page, limit=limit)
    return PaginatedResponse[MovieResponse](
        message="Movies retrieved successfully",
        data=[MovieResponse.model_validate(m, from_attributes=True) for m in result.items],
        pagination=result.pagination,
    )


@router.post(
    "",
    response_model=ApiResponse[MovieResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_movie(
    data: MovieCreate,
    service: MovieService = Depends(get_movie_service),
) -> ApiResponse[MovieResponse]:
    """Create a new movie."""
    movie = await service.create_movie(data)
    return ApiResponse[MovieResponse](
        message="Movie created successfully",
        data=MovieResponse.model_validate(movie, from_attributes=True),
    )


@router.get("/{id}", response_model=ApiResponse[MovieResponse], responses=_NOT_FOUND)
async def get_movie(
    movie_id: UUID = Path(alias="id"),
    service: MovieService = Depends(get_movie_service),
) -> ApiResponse[MovieResponse]:
    """Retrieve a single movie by ID."""
    try:
        movie = await service.get_movie(str(movie_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse[MovieResponse](
        message="Movie retrieved successfully",
        data=MovieResponse.model_validate(movie, from_attributes=True),
    )


@router.put("/{id}", response_model=ApiResponse[MovieResponse], responses=_NOT_FOUND)
async def update_movie(
    data: MovieUpdate,
    movie_id: UUID = Path(alias="id"),
    service: MovieService = Depends(get_movie_service),
) -> ApiResponse[MovieResponse]:
    """Update an existing movie; omitted fields are left unchanged."""
    try:
        movie = await service.update_movie(str(movie_id), data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse[MovieResponse](
        message="Movie updated successfully",
        data=MovieResponse.model_validate(movie, from_attributes=True),
    )


@router.delete("/{id}", response_model=ApiResponse[None], responses=_NOT_FOUND)
async def delete_movie(
    movie_id: UUID = Path(alias="id"),
    service: MovieService = Depends(get_movie_service),
) -> ApiResponse[None]:
    """Delete a movie by ID."""
    try:
        await service.delete_movie(str(movie_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse[None](message="Movie deleted successfully", data=None)
