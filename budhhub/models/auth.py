"""
Password reset schemas.

Dependencies: pydantic
System role: Password reset API contracts
"""

from pydantic import BaseModel, EmailStr, Field


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, max_length=128)


class TokenValidationResponse(BaseModel):
    valid: bool
