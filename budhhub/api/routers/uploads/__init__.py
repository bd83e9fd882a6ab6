"""
Uploads router package.

Exports the router for file upload endpoints.
"""

from .uploads_router import router

__all__ = ["router"]
