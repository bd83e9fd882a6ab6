"""
Enrollment and lesson progress CRUD operations.

Dependencies: sqlalchemy, budhhub.boundary.db.models
System role: Enrollment and progress persistence operations
"""

from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.base_crud import BaseCRUD
from budhhub.boundary.db.models.course_model import CourseModel
from budhhub.boundary.db.models.enrollment_model import (
    EnrollmentModel,
    LessonProgressModel,
)


class EnrollmentCRUD(BaseCRUD[EnrollmentModel]):
    """CRUD operations for EnrollmentModel."""

    def __init__(self) -> None:
        super().__init__(EnrollmentModel)

    async def get_for_learner(
        self,
        session: AsyncSession,
        course_id: UUID,
        learner_id: UUID,
    ) -> EnrollmentModel | None:
        """Retrieve a learner's enrollment in a course, if any."""
        stmt = select(EnrollmentModel).where(
            EnrollmentModel.course_id == course_id,
            EnrollmentModel.learner_id == learner_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_courses(
        self,
        session: AsyncSession,
        learner_id: UUID,
    ) -> Sequence[tuple[EnrollmentModel, CourseModel]]:
        """
        Retrieve a learner's enrollments joined to their courses.

        Args:
            session: Async database session
            learner_id: Learner UUID

        Returns:
            Sequence of (enrollment, course) rows, newest enrollment first
        """
        stmt = (
            select(EnrollmentModel, CourseModel)
            .join(CourseModel, EnrollmentModel.course_id == CourseModel.id)
            .where(EnrollmentModel.learner_id == learner_id)
            .order_by(EnrollmentModel.enrolled_at.desc())
        )
        result = await session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def enrolled_course_ids(
        self,
        session: AsyncSession,
        learner_id: UUID,
        course_ids: list[UUID],
    ) -> set[UUID]:
        """Subset of ``course_ids`` the learner is enrolled in."""
        if not course_ids:
            return set()
        stmt = select(EnrollmentModel.course_id).where(
            EnrollmentModel.learner_id == learner_id,
            EnrollmentModel.course_id.in_(course_ids),
        )
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def set_progress(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
        progress: int,
    ) -> None:
        stmt = (
            update(EnrollmentModel)
            .where(EnrollmentModel.id == enrollment_id)
            .values(progress=progress)
            .execution_options(synchronize_session=False)
        )
        await session.execute(stmt)

    async def delete_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        stmt = delete(EnrollmentModel).where(EnrollmentModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.rowcount


class LessonProgressCRUD(BaseCRUD[LessonProgressModel]):
    """CRUD operations for LessonProgressModel."""

    def __init__(self) -> None:
        super().__init__(LessonProgressModel)

    async def create_many(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
        lesson_ids: Sequence[UUID],
    ) -> None:
        """Insert uncompleted progress rows for the given lessons."""
        session.add_all(
            LessonProgressModel(
                enrollment_id=enrollment_id,
                lesson_id=lesson_id,
                completed=False,
            )
            for lesson_id in lesson_ids
        )
        await session.flush()

    async def get_for_lesson(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
        lesson_id: UUID,
    ) -> LessonProgressModel | None:
        stmt = select(LessonProgressModel).where(
            LessonProgressModel.enrollment_id == enrollment_id,
            LessonProgressModel.lesson_id == lesson_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_completed(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
        lesson_id: UUID,
    ) -> LessonProgressModel:
        """
        Upsert a completed progress row for the lesson.

        Args:
            session: Async database session
            enrollment_id: Enrollment UUID
            lesson_id: Lesson UUID

        Returns:
            The completed LessonProgressModel
        """
        now = datetime.now(timezone.utc)
        progress = await self.get_for_lesson(session, enrollment_id, lesson_id)
        if progress is None:
            return await self.create(
                session,
                enrollment_id=enrollment_id,
                lesson_id=lesson_id,
                completed=True,
                completed_at=now,
            )
        if not progress.completed:
            progress = await self.update(session, progress, completed=True, completed_at=now)
        return progress

    async def completed_count(self, session: AsyncSession, enrollment_id: UUID) -> int:
        stmt = select(func.count(LessonProgressModel.id)).where(
            LessonProgressModel.enrollment_id == enrollment_id,
            LessonProgressModel.completed.is_(True),
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def completed_lesson_ids(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
    ) -> set[UUID]:
        stmt = select(LessonProgressModel.lesson_id).where(
            LessonProgressModel.enrollment_id == enrollment_id,
            LessonProgressModel.completed.is_(True),
        )
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def delete_by_lessons(self, session: AsyncSession, lesson_ids: list[UUID]) -> int:
        if not lesson_ids:
            return 0
        stmt = delete(LessonProgressModel).where(LessonProgressModel.lesson_id.in_(lesson_ids))
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        enrollment_ids = select(EnrollmentModel.id).where(EnrollmentModel.course_id == course_id)
        stmt = delete(LessonProgressModel).where(
            LessonProgressModel.enrollment_id.in_(enrollment_ids)
        )
        result = await session.execute(stmt)
        return result.rowcount


enrollment_crud = EnrollmentCRUD()
lesson_progress_crud = LessonProgressCRUD()
