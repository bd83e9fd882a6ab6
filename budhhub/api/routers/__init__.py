"""API routers."""

from .auth import onboarding_router, password_router
from .catalog import router as catalog_router
from .health import router as health_router
from .instructor import router as instructor_router
from .learner import router as learner_router
from .uploads import router as uploads_router

__all__ = [
    "catalog_router",
    "health_router",
    "instructor_router",
    "learner_router",
    "onboarding_router",
    "password_router",
    "uploads_router",
]
