"""
Bearer token identity dependencies.

The identity provider signs JWTs with AUTH_SECRET; this module verifies
them and resolves the caller to a ``users`` row.

Dependencies: fastapi, PyJWT, budhhub.application.services
System role: Request authentication
"""

import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from budhhub.api.deps.dependencies import get_user_service
from budhhub.application.services.user_service import UserService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.configs import get_settings
from budhhub.core.exceptions import AuthenticationError
from budhhub.core.permissions import is_instructor_or_above

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Unauthorized") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_token(token: str) -> dict:
    """
    Verify a bearer token and return its claims.

    Raises:
        HTTPException(401): Secret unset, or token invalid/expired
    """
    auth_settings = get_settings().auth
    if not auth_settings.secret:
        logger.error("AUTH_SECRET is not configured; rejecting bearer token")
        raise _unauthorized()
    try:
        return jwt.decode(
            token,
            auth_settings.secret,
            algorithms=[auth_settings.algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.PyJWTError as e:
        logger.warning("Rejected bearer token", extra={"error": str(e)})
        raise _unauthorized("Invalid token")


async def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    user_service: UserService = Depends(get_user_service),
) -> UserModel | None:
    """
    Resolve the caller if a bearer token was sent.

    Returns:
        UserModel | None: Caller, None for anonymous requests

    Raises:
        HTTPException(401): Token present but invalid
    """
    if credentials is None:
        return None
    claims = decode_token(credentials.credentials)
    try:
        return await user_service.resolve_identity(claims)
    except AuthenticationError as e:
        raise _unauthorized(e.message)


async def get_current_user(
    user: UserModel | None = Depends(get_current_user_optional),
) -> UserModel:
    """
    Raises:
        HTTPException(401): No identity
    """
    if user is None:
        raise _unauthorized()
    return user


async def require_instructor(user: UserModel = Depends(get_current_user)) -> UserModel:
    """
    Raises:
        HTTPException(403): Caller is below INSTRUCTOR
    """
    if not is_instructor_or_above(user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Instructor access required",
        )
    return user
