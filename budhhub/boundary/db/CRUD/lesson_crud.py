"""
Lesson CRUD operations.

Lessons hang off modules, so course-scoped queries join through
``modules.course_id``.

Dependencies: sqlalchemy, budhhub.boundary.db.models
System role: Lesson persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.base_crud import BaseCRUD
from budhhub.boundary.db.models.lesson_model import LessonModel
from budhhub.boundary.db.models.module_model import ModuleModel


class LessonCRUD(BaseCRUD[LessonModel]):
    """CRUD operations for LessonModel."""

    def __init__(self) -> None:
        super().__init__(LessonModel)

    async def list_by_module(
        self,
        session: AsyncSession,
        module_id: UUID,
    ) -> Sequence[LessonModel]:
        """Lessons of a module in display order."""
        stmt = (
            select(LessonModel)
            .where(LessonModel.module_id == module_id)
            .order_by(LessonModel.ord, LessonModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_by_course(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> Sequence[LessonModel]:
        """
        All lessons of a course, ordered by module then lesson order.

        Args:
            session: Async database session
            course_id: Course UUID

        Returns:
            Sequence of LessonModel instances
        """
        stmt = (
            select(LessonModel)
            .join(ModuleModel, LessonModel.module_id == ModuleModel.id)
            .where(ModuleModel.course_id == course_id)
            .order_by(ModuleModel.ord, LessonModel.ord, LessonModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_for_module(
        self,
        session: AsyncSession,
        lesson_id: UUID,
        module_id: UUID,
    ) -> LessonModel | None:
        """Retrieve a lesson only if it belongs to the given module."""
        stmt = select(LessonModel).where(
            LessonModel.id == lesson_id,
            LessonModel.module_id == module_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_course_id(
        self,
        session: AsyncSession,
        lesson_id: UUID,
    ) -> tuple[LessonModel, UUID] | None:
        """
        Retrieve a lesson together with the id of the course it belongs to.

        Args:
            session: Async database session
            lesson_id: Lesson UUID

        Returns:
            (lesson, course_id) if found, None otherwise
        """
        stmt = (
            select(LessonModel, ModuleModel.course_id)
            .join(ModuleModel, LessonModel.module_id == ModuleModel.id)
            .where(LessonModel.id == lesson_id)
        )
        result = await session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def count_by_module(self, session: AsyncSession, module_id: UUID) -> int:
        return await self.count(session, LessonModel.module_id == module_id)

    async def count_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        module_ids = select(ModuleModel.id).where(ModuleModel.course_id == course_id)
        return await self.count(session, LessonModel.module_id.in_(module_ids))

    async def delete_by_ids(self, session: AsyncSession, lesson_ids: list[UUID]) -> int:
        if not lesson_ids:
            return 0
        stmt = delete(LessonModel).where(LessonModel.id.in_(lesson_ids))
        result = await session.execute(stmt)
        return result.rowcount


lesson_crud = LessonCRUD()
