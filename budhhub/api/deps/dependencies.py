"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: budhhub.configs, budhhub.application, budhhub.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.application.services import (
    CatalogService,
    CourseService,
    EnrollmentService,
    LessonService,
    MaterialService,
    ModuleService,
    PasswordResetService,
    UploadService,
    UserService,
)
from budhhub.boundary.cache.redis_cache import RedisCache
from budhhub.boundary.cache.redis_client import get_redis_client
from budhhub.boundary.cache.token_store import TokenStore
from budhhub.boundary.db import get_async_db
from budhhub.boundary.email.smtp_mailer import SMTPMailer
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.configs import Settings, get_settings


class ServiceCache:
    """Container for cached client instances."""

    def __init__(self):
        self._storage_client = None
        self._mailer = None

    @property
    def storage_client(self) -> ObjectStorageClient:
        """Get cached object storage client."""
        if self._storage_client is None:
            self._storage_client = ObjectStorageClient(get_settings().storage)
        return self._storage_client

    @property
    def mailer(self) -> SMTPMailer:
        """Get cached SMTP mailer."""
        if self._mailer is None:
            self._mailer = SMTPMailer(get_settings().smtp)
        return self._mailer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._storage_client = None
        self._mailer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_storage_client() -> ObjectStorageClient:
    """
    Get object storage client for uploads, cleanup and presigned URLs.

    Returns:
        ObjectStorageClient: Client for the uploads bucket
    """
    return get_service_cache().storage_client


def get_cache() -> RedisCache:
    """
    Get JSON cache over the shared Redis client.

    Returns:
        RedisCache: Cache, disabled when REDIS_URL is unset
    """
    return RedisCache(get_redis_client(), default_ttl=get_settings().redis.cache_ttl)


def get_token_store() -> TokenStore:
    return TokenStore(get_redis_client())


def get_mailer() -> SMTPMailer:
    return get_service_cache().mailer


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db)


def get_catalog_service(
    db: AsyncSession = Depends(get_async_db),
    cache: RedisCache = Depends(get_cache),
) -> CatalogService:
    """
    Get catalog service instance.

    Args:
        db: Async database session (injected via Depends)
        cache: Facet cache (injected via Depends)

    Returns:
        CatalogService: Catalog service instance
    """
    return CatalogService(
        db=db,
        cache=cache,
        filters_ttl=get_settings().redis.catalog_filters_ttl,
    )


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    storage: ObjectStorageClient = Depends(get_storage_client),
    cache: RedisCache = Depends(get_cache),
) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)
        storage: Object storage client (injected via Depends)
        cache: Facet cache to invalidate (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db, storage=storage, cache=cache)


def get_module_service(
    db: AsyncSession = Depends(get_async_db),
    storage: ObjectStorageClient = Depends(get_storage_client),
) -> ModuleService:
    return ModuleService(db=db, storage=storage)


def get_lesson_service(
    db: AsyncSession = Depends(get_async_db),
    storage: ObjectStorageClient = Depends(get_storage_client),
) -> LessonService:
    return LessonService(db=db, storage=storage)


def get_material_service(
    db: AsyncSession = Depends(get_async_db),
    storage: ObjectStorageClient = Depends(get_storage_client),
) -> MaterialService:
    return MaterialService(db=db, storage=storage)


def get_enrollment_service(
    db: AsyncSession = Depends(get_async_db),
    storage: ObjectStorageClient = Depends(get_storage_client),
) -> EnrollmentService:
    """
    Get enrollment service instance.

    Args:
        db: Async database session (injected via Depends)
        storage: Object storage client for learner download URLs (injected)

    Returns:
        EnrollmentService: Enrollment service instance
    """
    return EnrollmentService(db=db, storage=storage)


def get_upload_service(
    db: AsyncSession = Depends(get_async_db),
    storage: ObjectStorageClient = Depends(get_storage_client),
) -> UploadService:
    """
    Get upload service instance.

    Args:
        db: Async database session used for ownership checks (injected)
        storage: Object storage client (injected)

    Returns:
        UploadService: Upload service with configured size limits
    """
    return UploadService(db=db, storage=storage, settings=get_settings().upload)


def get_password_reset_service(
    db: AsyncSession = Depends(get_async_db),
    tokens: TokenStore = Depends(get_token_store),
    mailer: SMTPMailer = Depends(get_mailer),
) -> PasswordResetService:
    """
    Get password reset service instance.

    Returns:
        PasswordResetService: Service wired to Redis tokens and SMTP
    """
    settings = get_settings()
    return PasswordResetService(
        db=db,
        tokens=tokens,
        mailer=mailer,
        app_url=settings.app_url,
        token_ttl=settings.auth.password_reset_ttl,
    )
