"""
Password reset API endpoints.

Routes:
- POST /auth/forgot-password - Email a reset link
- GET /auth/reset-password - Check a reset token
- POST /auth/reset-password - Set a new password

Dependencies: budhhub.application.services, budhhub.models
System role: Password reset HTTP API
"""

from fastapi import APIRouter, Depends, Query

from budhhub.api.deps.dependencies import get_password_reset_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.password_reset_service import PasswordResetService
from budhhub.models.auth import (
    ForgotPasswordRequest,
    ResetPasswordRequest,
    TokenValidationResponse,
)
from budhhub.models.common import MessageResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/forgot-password", response_model=MessageResponse)
@handle_service_errors
async def forgot_password(
    request: ForgotPasswordRequest,
    reset_service: PasswordResetService = Depends(get_password_reset_service),
) -> MessageResponse:
    """
    Email a password reset link.

    Raises:
        HTTPException(404): No account with this email
        HTTPException(500): Email could not be sent
    """
    await reset_service.request_reset(request.email)
    return MessageResponse(message="Password reset email sent. Please check your inbox.")


@router.get("/reset-password", response_model=TokenValidationResponse)
@handle_service_errors
async def validate_reset_token(
    token: str | None = Query(None),
    reset_service: PasswordResetService = Depends(get_password_reset_service),
) -> TokenValidationResponse:
    """
    Raises:
        HTTPException(400): Token missing, invalid or expired
    """
    valid = await reset_service.validate_token(token)
    return TokenValidationResponse(valid=valid)


@router.post("/reset-password", response_model=MessageResponse)
@handle_service_errors
async def reset_password(
    request: ResetPasswordRequest,
    reset_service: PasswordResetService = Depends(get_password_reset_service),
) -> MessageResponse:
    """
    Set a new password with a reset token.

    Raises:
        HTTPException(400): Weak password, or invalid/expired token
    """
    await reset_service.reset_password(request.token, request.password)
    return MessageResponse(message="Password has been reset successfully")
