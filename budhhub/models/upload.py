"""
Upload schemas.

Dependencies: pydantic
System role: Upload API contracts
"""

from datetime import datetime

from pydantic import BaseModel

from budhhub.boundary.db.models.material_model import MaterialType


class UploadResponse(BaseModel):
    """Result of a proxied upload."""

    key: str
    url: str
    filename: str
    size: int
    type: str
    material_type: MaterialType | None = None


class SignedUploadUrlResponse(BaseModel):
    url: str
    key: str
    expires_in: int
    expires_at: datetime
