"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema for validation failures."""

    error: str = Field(description="Error message")
    details: list[Any] | None = Field(default=None, description="Itemised validation errors")


class PaginationInfo(BaseModel):
    """Page metadata for list endpoints."""

    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next: bool
    has_prev: bool
