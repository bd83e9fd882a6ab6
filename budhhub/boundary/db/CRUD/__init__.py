"""CRUD operations for database models."""

from budhhub.boundary.db.CRUD.base_crud import BaseCRUD
from budhhub.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from budhhub.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from budhhub.boundary.db.CRUD.module_crud import ModuleCRUD, module_crud
from budhhub.boundary.db.CRUD.lesson_crud import LessonCRUD, lesson_crud
from budhhub.boundary.db.CRUD.enrollment_crud import (
    EnrollmentCRUD,
    LessonProgressCRUD,
    enrollment_crud,
    lesson_progress_crud,
)
from budhhub.boundary.db.CRUD.material_crud import MaterialCRUD, material_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "CourseCRUD",
    "ModuleCRUD",
    "LessonCRUD",
    "EnrollmentCRUD",
    "LessonProgressCRUD",
    "MaterialCRUD",
    "user_crud",
    "course_crud",
    "module_crud",
    "lesson_crud",
    "enrollment_crud",
    "lesson_progress_crud",
    "material_crud",
]
