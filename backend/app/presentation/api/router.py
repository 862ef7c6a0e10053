"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from app.presentation.api.endpoints.health import router as health_router
from app.presentation.api.endpoints.movies import router as movies_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(movies_router)
