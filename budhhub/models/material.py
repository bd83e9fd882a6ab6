"""
Study material schemas.

Dependencies: pydantic
System role: Material API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from budhhub.boundary.db.models.material_model import MaterialType


class CreateMaterialRequest(BaseModel):
    """Registers an already uploaded file as a material."""

    file_name: str = Field(..., min_length=1, max_length=512)
    file_key: str = Field(..., min_length=1, max_length=1024)
    file_type: str | None = Field(None, max_length=100, description="MIME type")
    file_size: int | None = Field(None, ge=0, description="Size in bytes")
    material_type: MaterialType | None = Field(
        None,
        description="Derived from file_type when omitted",
    )


class UpdateMaterialRequest(BaseModel):
    file_name: str | None = Field(None, min_length=1, max_length=512)
    material_type: MaterialType | None = None


class MaterialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    course_id: uuid.UUID
    lesson_id: uuid.UUID | None
    file_name: str
    file_key: str
    file_type: str | None
    file_size: int | None
    material_type: MaterialType
    created_at: datetime


class MaterialUrlResponse(BaseModel):
    url: str
    file_name: str
