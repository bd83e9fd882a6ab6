"""
Global exception handlers.

Every error body uses one envelope: ``{"error": message}``, plus
``"details"`` when there is structured context.

- HTTPException (including the ones raised by handle_service_errors) -> its status
- RequestValidationError -> 400 {"error": "Validation failed", "details": [...]}
- Exception (catch-all) -> 500 without internal details

Dependencies: fastapi, starlette
System role: App-level error responses
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _error_body(detail) -> dict:
    if isinstance(detail, dict) and "error" in detail:
        return jsonable_encoder(detail)
    return {"error": jsonable_encoder(detail)}


def _register_http_error_handler(app: FastAPI) -> None:
    """Register HTTPException handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTPException detail in the error envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.detail),
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request body, query and path validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}",
            extra={"path": request.url.path, "error_count": len(exc.errors())},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation failed",
                "details": jsonable_encoder(exc.errors()),
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An internal error occurred"},
        )
