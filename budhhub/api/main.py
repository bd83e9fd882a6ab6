"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, budhhub.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from budhhub.api.deps.dependencies import get_service_cache
from budhhub.api.error_handlers import register_error_handlers
from budhhub.boundary.cache.redis_client import get_redis_client
from budhhub.configs import get_settings
from budhhub.observability.logger import configure_logging
from budhhub.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    catalog_router,
    health_router,
    instructor_router,
    learner_router,
    onboarding_router,
    password_router,
    uploads_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    storage = get_service_cache().storage_client
    if not storage.is_configured:
        logger.warning("Object storage is not configured; uploads will fail")

    yield

    # Shutdown
    client = get_redis_client()
    if client is not None:
        await client.aclose()
    get_service_cache().clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="BudhHub API",
        description="Learning management platform: courses, enrollment and progress tracking",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_error_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(instructor_router, prefix="/api/v1")
    app.include_router(learner_router, prefix="/api/v1")
    app.include_router(uploads_router, prefix="/api/v1")
    app.include_router(onboarding_router, prefix="/api/v1")
    app.include_router(password_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "budhhub.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
