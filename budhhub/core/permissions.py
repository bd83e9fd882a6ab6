"""
Course access rules.

Pure checks over a user and a course row, plus loaders that fetch a row
and raise the matching domain error when the caller may not touch it.

Dependencies: sqlalchemy, budhhub.boundary.db
System role: Row-level authorization shared by all services
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.course_crud import course_crud
from budhhub.boundary.db.CRUD.enrollment_crud import enrollment_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.CRUD.module_crud import module_crud
from budhhub.boundary.db.models.course_model import CourseModel
from budhhub.boundary.db.models.enrollment_model import EnrollmentModel
from budhhub.boundary.db.models.lesson_model import LessonModel
from budhhub.boundary.db.models.module_model import ModuleModel
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.core.exceptions import NotFoundError, PermissionDeniedError
from budhhub.core.roles import UserRole, role_level


def has_role(user: UserModel | None, role: UserRole) -> bool:
    """Exact role match."""
    return user is not None and user.role == role


def has_role_or_above(user: UserModel | None, role: UserRole) -> bool:
    """True if the user's role sits at or above ``role`` in the hierarchy."""
    return user is not None and role_level(user.role) >= role_level(role)


def is_instructor_or_above(user: UserModel | None) -> bool:
    return has_role_or_above(user, UserRole.INSTRUCTOR)


def can_edit_course(user: UserModel | None, course: CourseModel) -> bool:
    """Only the course's own instructor may edit it."""
    return user is not None and course.instructor_id == user.id


def can_view_course(user: UserModel | None, course: CourseModel) -> bool:
    """
    Owners see their drafts, everyone sees published courses, admins see all.

    Args:
        user: Caller, None for anonymous requests
        course: Course row

    Returns:
        bool: True if the course may be shown
    """
    if course.is_published:
        return True
    if user is None:
        return False
    return course.instructor_id == user.id or has_role(user, UserRole.ADMIN)


async def load_editable_course(
    db: AsyncSession,
    course_id: UUID,
    user: UserModel,
) -> CourseModel:
    """
    Fetch a course the caller owns.

    Raises:
        NotFoundError: Course does not exist
        PermissionDeniedError: Caller is not the course instructor
    """
    course = await course_crud.get_by_id(db, course_id)
    if course is None:
        raise NotFoundError("Course", course_id)
    if not can_edit_course(user, course):
        raise PermissionDeniedError(
            "You do not have permission to modify this course",
            details={"course_id": str(course_id)},
        )
    return course


async def require_enrollment(
    db: AsyncSession,
    course_id: UUID,
    user: UserModel,
) -> EnrollmentModel:
    """
    Fetch the caller's enrollment in a course.

    Raises:
        PermissionDeniedError: Caller is not enrolled
    """
    enrollment = await enrollment_crud.get_for_learner(db, course_id, user.id)
    if enrollment is None:
        raise PermissionDeniedError(
            "You are not enrolled in this course",
            details={"course_id": str(course_id)},
        )
    return enrollment


async def load_editable_module(
    db: AsyncSession,
    course_id: UUID,
    module_id: UUID,
    user: UserModel,
) -> tuple[CourseModel, ModuleModel]:
    """
    Fetch an owned course and one of its modules.

    Raises:
        NotFoundError: Course missing, or module missing from that course
        PermissionDeniedError: Caller is not the course instructor
    """
    course = await load_editable_course(db, course_id, user)
    module = await module_crud.get_for_course(db, module_id, course_id)
    if module is None:
        raise NotFoundError("Module", module_id)
    return course, module


async def load_editable_lesson(
    db: AsyncSession,
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    user: UserModel,
) -> tuple[CourseModel, ModuleModel, LessonModel]:
    """
    Fetch an owned course, a module in it and a lesson in that module.

    Raises:
        NotFoundError: Any of the three rows is missing or mismatched
        PermissionDeniedError: Caller is not the course instructor
    """
    course, module = await load_editable_module(db, course_id, module_id, user)
    lesson = await lesson_crud.get_for_module(db, lesson_id, module_id)
    if lesson is None:
        raise NotFoundError("Lesson", lesson_id)
    return course, module, lesson


async def load_course_lesson(
    db: AsyncSession,
    course_id: UUID,
    lesson_id: UUID,
) -> LessonModel:
    """
    Fetch a lesson and check it belongs to the course.

    Raises:
        NotFoundError: Lesson does not exist
        PermissionDeniedError: Lesson belongs to another course
    """
    found = await lesson_crud.get_with_course_id(db, lesson_id)
    if found is None:
        raise NotFoundError("Lesson", lesson_id)
    lesson, lesson_course_id = found
    if lesson_course_id != course_id:
        raise PermissionDeniedError(
            "Lesson does not belong to this course",
            details={"course_id": str(course_id), "lesson_id": str(lesson_id)},
        )
    return lesson
