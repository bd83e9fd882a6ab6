"""
Enrollment service orchestrator.

Handles enrolling, the learner's course list and study view, lesson
completion with progress recomputation, and signed access to lesson videos
and materials for enrolled learners.

Dependencies: budhhub.boundary.db.CRUD, budhhub.boundary.storage
System role: Learner use case orchestration
"""

import logging
from collections import defaultdict
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.course_crud import course_crud
from budhhub.boundary.db.CRUD.enrollment_crud import enrollment_crud, lesson_progress_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.CRUD.material_crud import material_crud
from budhhub.boundary.db.CRUD.module_crud import module_crud
from budhhub.boundary.db.models.enrollment_model import EnrollmentModel
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.core.exceptions import InvalidRequestError, NotFoundError, PermissionDeniedError
from budhhub.core.permissions import load_course_lesson, require_enrollment

logger = logging.getLogger(__name__)


def calculate_progress(completed: int, total: int) -> int:
    """
    Percentage of completed lessons, rounded half up and capped at 100.

    Returns 0 for a course without lessons.
    """
    if total <= 0:
        return 0
    return min(100, (completed * 200 + total) // (2 * total))


class EnrollmentService:
    """Learner-facing enrollment and progress operations."""

    def __init__(self, db: AsyncSession, storage: ObjectStorageClient) -> None:
        """
        Initialize enrollment service.

        Args:
            db: Async SQLAlchemy session
            storage: Object storage client for video/material URLs
        """
        self.db = db
        self.storage = storage

    async def enroll(self, course_id: UUID, user: UserModel) -> EnrollmentModel:
        """
        Enroll the caller in a published course.

        Creates an uncompleted progress row for every lesson in the course.

        Returns:
            EnrollmentModel: New enrollment with progress 0

        Raises:
            NotFoundError: Course does not exist
            PermissionDeniedError: Course is not published
            InvalidRequestError: Caller is already enrolled
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise NotFoundError("Course", course_id)
        if not course.is_published:
            raise PermissionDeniedError("Course is not published")

        existing = await enrollment_crud.get_for_learner(self.db, course_id, user.id)
        if existing is not None:
            raise InvalidRequestError("Already enrolled in this course")

        try:
            enrollment = await enrollment_crud.create(
                self.db,
                course_id=course_id,
                learner_id=user.id,
                progress=0,
            )
            lessons = await lesson_crud.list_by_course(self.db, course_id)
            await lesson_progress_crud.create_many(
                self.db, enrollment.id, [lesson.id for lesson in lessons]
            )
            await self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent enroll request
            await self.db.rollback()
            raise InvalidRequestError("Already enrolled in this course") from e

        logger.info(
            "Learner enrolled",
            extra={
                "course_id": str(course_id),
                "user_id": str(user.id),
                "lesson_count": len(lessons),
            },
        )
        return enrollment

    async def list_my_courses(self, user: UserModel) -> list[dict]:
        """
        The caller's enrollments with their courses.

        Returns:
            list[dict]: [{"enrollment", "course"}], newest enrollment first
        """
        rows = await enrollment_crud.list_with_courses(self.db, user.id)
        return [{"enrollment": enrollment, "course": course} for enrollment, course in rows]

    async def get_learning_view(self, course_id: UUID, user: UserModel) -> dict:
        """
        Assemble the study view of an enrolled course.

        Returns:
            dict: {"course", "enrollment", "modules", "course_materials"} where
            each module dict carries its lessons and each lesson dict carries
            ``completed`` and its materials

        Raises:
            PermissionDeniedError: Caller is not enrolled
            NotFoundError: Course no longer exists
        """
        enrollment = await require_enrollment(self.db, course_id, user)
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise NotFoundError("Course", course_id)

        modules = await module_crud.list_by_course(self.db, course_id)
        lessons = await lesson_crud.list_by_course(self.db, course_id)
        completed_ids = await lesson_progress_crud.completed_lesson_ids(self.db, enrollment.id)
        lesson_materials = await material_crud.list_for_lessons(
            self.db, [lesson.id for lesson in lessons]
        )
        course_materials = await material_crud.list_course_level(self.db, course_id)

        materials_by_lesson = defaultdict(list)
        for material in lesson_materials:
            materials_by_lesson[material.lesson_id].append(material)

        lessons_by_module = defaultdict(list)
        for lesson in lessons:
            lessons_by_module[lesson.module_id].append(
                {
                    "lesson": lesson,
                    "completed": lesson.id in completed_ids,
                    "materials": materials_by_lesson[lesson.id],
                }
            )

        return {
            "course": course,
            "enrollment": enrollment,
            "modules": [
                {"module": module, "lessons": lessons_by_module[module.id]}
                for module in modules
            ],
            "course_materials": course_materials,
        }

    async def complete_lesson(
        self,
        course_id: UUID,
        lesson_id: UUID,
        user: UserModel,
    ) -> dict:
        """
        Mark a lesson complete and recompute enrollment progress.

        Returns:
            dict: {"success", "progress", "completed", "total"}

        Raises:
            PermissionDeniedError: Not enrolled, or lesson outside the course
            NotFoundError: Lesson does not exist
        """
        enrollment = await require_enrollment(self.db, course_id, user)
        await load_course_lesson(self.db, course_id, lesson_id)

        await lesson_progress_crud.mark_completed(self.db, enrollment.id, lesson_id)

        total = await lesson_crud.count_by_course(self.db, course_id)
        completed = await lesson_progress_crud.completed_count(self.db, enrollment.id)
        progress = calculate_progress(completed, total)

        await enrollment_crud.set_progress(self.db, enrollment.id, progress)
        await self.db.commit()

        logger.info(
            "Lesson completed",
            extra={
                "course_id": str(course_id),
                "lesson_id": str(lesson_id),
                "progress": progress,
            },
        )
        return {"success": True, "progress": progress, "completed": completed, "total": total}

    async def get_lesson_video_url(
        self,
        course_id: UUID,
        lesson_id: UUID,
        user: UserModel,
    ) -> str:
        """
        Playback URL of a lesson video for an enrolled learner.

        Raises:
            PermissionDeniedError: Not enrolled, or lesson outside the course
            NotFoundError: Lesson or its video is missing
        """
        await require_enrollment(self.db, course_id, user)
        lesson = await load_course_lesson(self.db, course_id, lesson_id)
        if not lesson.video_key:
            raise NotFoundError("Video", message="No video found for this lesson")
        return self.storage.get_access_url(lesson.video_key)

    async def get_course_material_url(
        self,
        course_id: UUID,
        material_id: UUID,
        user: UserModel,
    ) -> dict:
        """
        Download URL of a course-level material.

        Returns:
            dict: {"url", "file_name"}
        """
        await require_enrollment(self.db, course_id, user)
        material = await material_crud.get_course_level(self.db, material_id, course_id)
        if material is None:
            raise NotFoundError("Material", material_id)
        return {
            "url": self.storage.get_access_url(material.file_key),
            "file_name": material.file_name,
        }

    async def get_lesson_material_url(
        self,
        course_id: UUID,
        lesson_id: UUID,
        material_id: UUID,
        user: UserModel,
    ) -> dict:
        """
        Download URL of a lesson-level material.

        Returns:
            dict: {"url", "file_name"}
        """
        await require_enrollment(self.db, course_id, user)
        await load_course_lesson(self.db, course_id, lesson_id)
        material = await material_crud.get_for_lesson(self.db, material_id, lesson_id)
        if material is None:
            raise NotFoundError("Material", material_id)
        return {
            "url": self.storage.get_access_url(material.file_key),
            "file_name": material.file_name,
        }
