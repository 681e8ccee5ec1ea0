"""Main API router that aggregates all sub-routers."""

from fastapi import APIRouter

from .users import router as users_router
from .lessons import router as lessons_router
from .comments import router as comments_router
from .payments import router as payments_router

router = APIRouter()

router.include_router(users_router, prefix="/users", tags=["Users"])
router.include_router(lessons_router, prefix="/lessons", tags=["Lessons"])
router.include_router(comments_router, prefix="/comments", tags=["Comments"])
router.include_router(payments_router, tags=["Payments"])

__all__ = ["router"]
