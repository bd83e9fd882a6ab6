"""
User schemas.

Dependencies: pydantic
System role: User and onboarding API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from budhhub.core.roles import UserRole


class OnboardingRequest(BaseModel):
    """Role selection plus profile, submitted once after sign-up."""

    role: Literal["INSTRUCTOR", "LEARNER"] = Field(..., description="Chosen platform role")
    name: str = Field(..., min_length=2, max_length=255, description="Display name")
    bio: str | None = Field(None, max_length=1000, description="Short profile text")


class UserResponse(BaseModel):
    """Public view of a user row."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str | None
    email: str
    image: str | None = None
    bio: str | None = None
    role: UserRole
    created_at: datetime
