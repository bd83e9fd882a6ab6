"""
Course domain models and schemas.

Request/response schemas for instructor course management and the public
catalog.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from budhhub.boundary.db.models.course_model import CourseDifficulty
from budhhub.models.common import PaginationInfo
from budhhub.models.lesson import LessonResponse
from budhhub.models.module import ModuleResponse


def validate_http_url(value: str | None) -> str | None:
    """Accept only absolute http(s) URLs."""
    if value is None:
        return value
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Invalid thumbnail URL")
    return value


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    title: str = Field(..., min_length=1, max_length=512, description="Course title")
    description: str | None = Field(None, description="Course description")
    category: str | None = Field(None, max_length=128, description="Catalog category")
    difficulty: CourseDifficulty | None = Field(None, description="Beginner, Intermediate or Advanced")
    thumbnail_url: str | None = Field(None, max_length=1024, description="Thumbnail URL")
    price: float | None = Field(None, ge=0, description="Course price")

    @field_validator("thumbnail_url")
    @classmethod
    def _check_thumbnail_url(cls, value: str | None) -> str | None:
        return validate_http_url(value)


class UpdateCourseRequest(BaseModel):
    """Request schema for partially updating a course."""

    title: str | None = Field(None, min_length=1, max_length=512)
    description: str | None = None
    category: str | None = Field(None, max_length=128)
    difficulty: CourseDifficulty | None = None
    thumbnail_url: str | None = Field(None, max_length=1024)
    price: float | None = Field(None, ge=0)

    @field_validator("thumbnail_url")
    @classmethod
    def _check_thumbnail_url(cls, value: str | None) -> str | None:
        return validate_http_url(value)


class PublishCourseRequest(BaseModel):
    """Request schema for publishing or unpublishing a course."""

    is_published: StrictBool


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    instructor_id: uuid.UUID
    title: str
    description: str | None
    category: str | None
    difficulty: CourseDifficulty | None
    thumbnail_url: str | None
    price: float
    is_published: bool
    total_lessons: int
    created_at: datetime
    updated_at: datetime


class PublishCourseResponse(BaseModel):
    """Course after a publish toggle plus a human-readable message."""

    message: str
    course: CourseResponse


class CatalogCourseResponse(CourseResponse):
    """Catalog entry annotated with the caller's enrollment."""

    is_enrolled: bool = False


class CatalogFilters(BaseModel):
    """Facet values available for catalog filtering."""

    categories: list[str]
    difficulties: list[str]


class CatalogResponse(BaseModel):
    """Published course listing."""

    courses: list[CatalogCourseResponse]
    pagination: PaginationInfo
    filters: CatalogFilters


class CourseDetailResponse(BaseModel):
    """Course with its modules and lessons, each in display order."""

    course: CourseResponse
    modules: list[ModuleResponse]
    lessons: list[LessonResponse]
