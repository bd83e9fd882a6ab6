"""API-specific dependencies."""

# Re-export common dependencies
from .auth import get_current_user, get_current_user_optional, require_instructor
from .dependencies import (
    get_cache,
    get_catalog_service,
    get_course_service,
    get_enrollment_service,
    get_lesson_service,
    get_material_service,
    get_module_service,
    get_password_reset_service,
    get_settings_dependency,
    get_storage_client,
    get_upload_service,
    get_user_service,
)

__all__ = [
    "get_cache",
    "get_catalog_service",
    "get_course_service",
    "get_current_user",
    "get_current_user_optional",
    "get_enrollment_service",
    "get_lesson_service",
    "get_material_service",
    "get_module_service",
    "get_password_reset_service",
    "get_settings_dependency",
    "get_storage_client",
    "get_upload_service",
    "get_user_service",
    "require_instructor",
]
