"""
Course material CRUD operations.

Dependencies: sqlalchemy, budhhub.boundary.db.models
System role: Study material persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.base_crud import BaseCRUD
from budhhub.boundary.db.models.material_model import MaterialModel


class MaterialCRUD(BaseCRUD[MaterialModel]):
    """CRUD operations for MaterialModel."""

    def __init__(self) -> None:
        super().__init__(MaterialModel)

    async def list_course_level(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> Sequence[MaterialModel]:
        """Materials attached to the course itself (``lesson_id IS NULL``)."""
        stmt = (
            select(MaterialModel)
            .where(
                MaterialModel.course_id == course_id,
                MaterialModel.lesson_id.is_(None),
            )
            .order_by(MaterialModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_for_lessons(
        self,
        session: AsyncSession,
        lesson_ids: Sequence[UUID],
    ) -> Sequence[MaterialModel]:
        """Materials attached to any of the given lessons, oldest first."""
        if not lesson_ids:
            return []
        stmt = (
            select(MaterialModel)
            .where(MaterialModel.lesson_id.in_(lesson_ids))
            .order_by(MaterialModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_by_course(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> Sequence[MaterialModel]:
        """Every material of a course, course-level and lesson-level."""
        stmt = select(MaterialModel).where(MaterialModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_course_level(
        self,
        session: AsyncSession,
        material_id: UUID,
        course_id: UUID,
    ) -> MaterialModel | None:
        """Retrieve a course-level material of the given course."""
        stmt = select(MaterialModel).where(
            MaterialModel.id == material_id,
            MaterialModel.course_id == course_id,
            MaterialModel.lesson_id.is_(None),
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_lesson(
        self,
        session: AsyncSession,
        material_id: UUID,
        lesson_id: UUID,
    ) -> MaterialModel | None:
        """Retrieve a material attached to the given lesson."""
        stmt = select(MaterialModel).where(
            MaterialModel.id == material_id,
            MaterialModel.lesson_id == lesson_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_lessons(self, session: AsyncSession, lesson_ids: list[UUID]) -> int:
        if not lesson_ids:
            return 0
        stmt = delete(MaterialModel).where(MaterialModel.lesson_id.in_(lesson_ids))
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        stmt = delete(MaterialModel).where(MaterialModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.rowcount


material_crud = MaterialCRUD()
