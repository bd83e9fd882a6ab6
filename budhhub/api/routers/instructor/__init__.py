"""
Instructor router package.

Exports the router for course authoring endpoints.
"""

from fastapi import APIRouter

from .courses_router import router as courses_router
from .lessons_router import router as lessons_router
from .materials_router import router as materials_router
from .modules_router import router as modules_router

router = APIRouter()
router.include_router(courses_router)
router.include_router(modules_router)
router.include_router(lessons_router)
router.include_router(materials_router)

__all__ = ["router"]
