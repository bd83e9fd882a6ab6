"""
Onboarding API endpoints.

Routes:
- POST /onboarding - Choose role and profile
- GET /onboarding/me - Caller's profile

Dependencies: budhhub.application.services, budhhub.models
System role: Account onboarding HTTP API
"""

from fastapi import APIRouter, Depends

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import get_user_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.user_service import UserService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.models.user import OnboardingRequest, UserResponse

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.post("", response_model=UserResponse)
@handle_service_errors
async def complete_onboarding(
    request: OnboardingRequest,
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Store the caller's role, name and bio.

    Raises:
        HTTPException(400): Invalid role, name or bio
        HTTPException(401): Not signed in
    """
    updated = await user_service.complete_onboarding(
        user,
        role=request.role,
        name=request.name,
        bio=request.bio,
    )
    return UserResponse.model_validate(updated)


@router.get("/me", response_model=UserResponse)
async def get_me(user: UserModel = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user)
