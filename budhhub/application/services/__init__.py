"""Application services: one orchestrator per resource family."""

from budhhub.application.services.catalog_service import CatalogService
from budhhub.application.services.course_service import CourseService
from budhhub.application.services.enrollment_service import EnrollmentService
from budhhub.application.services.lesson_service import LessonService
from budhhub.application.services.material_service import MaterialService
from budhhub.application.services.module_service import ModuleService
from budhhub.application.services.password_reset_service import PasswordResetService
from budhhub.application.services.upload_service import UploadService
from budhhub.application.services.user_service import UserService

__all__ = [
    "CatalogService",
    "CourseService",
    "EnrollmentService",
    "LessonService",
    "MaterialService",
    "ModuleService",
    "PasswordResetService",
    "UploadService",
    "UserService",
]
