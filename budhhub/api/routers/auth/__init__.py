"""
Account router package.

Exports the onboarding and password reset routers.
"""

from .onboarding_router import router as onboarding_router
from .password_router import router as password_router

__all__ = ["onboarding_router", "password_router"]
