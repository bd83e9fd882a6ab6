"""
Service error handling for routers.

Provides a decorator that turns domain exceptions raised by services into
HTTPExceptions with consistent status codes and log context.

Dependencies: fastapi, budhhub.core.exceptions
System role: Domain error to HTTP mapping
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from budhhub.core.exceptions import (
    AuthenticationError,
    BudhHubError,
    EmailDeliveryError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
    StorageError,
    StorageNotConfiguredError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with the domain error's details
    - Mapping specific exceptions to HTTP status codes
    - Never leaking internals for unexpected failures
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning("Resource not found", extra={"error": e.message, **e.details})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except AuthenticationError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=e.message,
                headers={"WWW-Authenticate": "Bearer"},
            )

        except PermissionDeniedError as e:
            logger.warning("Permission denied", extra={"error": e.message, **e.details})
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)

        except InvalidRequestError as e:
            logger.warning("Invalid request", extra={"error": e.message, **e.details})
            if e.errors:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail={"error": e.message, "details": e.errors},
                )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except StorageNotConfiguredError as e:
            logger.error("Object storage not configured")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=e.message,
            )

        except StorageError as e:
            logger.error("Storage operation failed", extra={"error": e.message, **e.details})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Storage operation failed",
            )

        except EmailDeliveryError as e:
            logger.error("Email delivery failed", extra={"error": e.message})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to send email",
            )

        except BudhHubError as e:
            logger.error("Unhandled domain error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in service operation",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
