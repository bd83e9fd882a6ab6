"""
Lesson schemas.

Dependencies: pydantic
System role: Lesson API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateLessonRequest(BaseModel):
    """Request schema for creating a lesson; ``ord`` defaults to append."""

    title: str = Field(..., min_length=1, max_length=512)
    content: str | None = None
    video_key: str | None = Field(None, max_length=1024)
    video_size: int | None = Field(None, ge=0)
    video_duration: int | None = Field(None, ge=0)
    video_mime_type: str | None = Field(None, max_length=100)
    ord: int | None = Field(None, ge=0)


class UpdateLessonRequest(BaseModel):
    """Request schema for partially updating a lesson."""

    title: str | None = Field(None, min_length=1, max_length=512)
    content: str | None = None
    video_key: str | None = Field(None, max_length=1024)
    video_size: int | None = Field(None, ge=0)
    video_duration: int | None = Field(None, ge=0)
    video_mime_type: str | None = Field(None, max_length=100)
    ord: int | None = Field(None, ge=0)


class LessonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    module_id: uuid.UUID
    title: str
    content: str | None
    video_key: str | None
    video_size: int | None
    video_duration: int | None
    video_mime_type: str | None
    ord: int
    created_at: datetime
    updated_at: datetime


class VideoUrlResponse(BaseModel):
    url: str
