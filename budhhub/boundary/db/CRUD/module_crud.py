"""
Module CRUD operations.

Dependencies: sqlalchemy, budhhub.boundary.db.models
System role: Module persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.base_crud import BaseCRUD
from budhhub.boundary.db.models.module_model import ModuleModel


class ModuleCRUD(BaseCRUD[ModuleModel]):
    """CRUD operations for ModuleModel."""

    def __init__(self) -> None:
        super().__init__(ModuleModel)

    async def list_by_course(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> Sequence[ModuleModel]:
        """Modules of a course in display order."""
        stmt = (
            select(ModuleModel)
            .where(ModuleModel.course_id == course_id)
            .order_by(ModuleModel.ord, ModuleModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_for_course(
        self,
        session: AsyncSession,
        module_id: UUID,
        course_id: UUID,
    ) -> ModuleModel | None:
        """
        Retrieve a module only if it belongs to the given course.

        Args:
            session: Async database session
            module_id: Module UUID
            course_id: Expected parent course UUID

        Returns:
            ModuleModel if found in that course, None otherwise
        """
        stmt = select(ModuleModel).where(
            ModuleModel.id == module_id,
            ModuleModel.course_id == course_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        return await self.count(session, ModuleModel.course_id == course_id)

    async def delete_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        stmt = delete(ModuleModel).where(ModuleModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.rowcount


module_crud = ModuleCRUD()
