"""
Learner router package.

Exports the router for enrolled learners' course endpoints.
"""

from .my_courses_router import router

__all__ = ["router"]
