"""
Catalog router package.

Exports the router for public course browsing and enrollment.
"""

from .catalog_router import router

__all__ = ["router"]
