"""
Module schemas.

Dependencies: pydantic
System role: Module API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateModuleRequest(BaseModel):
    """Request schema for creating a module; ``ord`` defaults to append."""

    title: str = Field(..., min_length=1, max_length=512)
    ord: int | None = Field(None, ge=0, description="Display order")


class UpdateModuleRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=512)
    ord: int | None = Field(None, ge=0)


class ModuleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    course_id: uuid.UUID
    title: str
    ord: int
    created_at: datetime
    updated_at: datetime
