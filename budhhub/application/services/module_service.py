"""
Module service orchestrator.

Dependencies: budhhub.boundary.db.CRUD, budhhub.boundary.storage
System role: Module use case orchestration
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.application.services.content_cleanup import delete_lessons
from budhhub.boundary.db.CRUD.course_crud import course_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.CRUD.module_crud import module_crud
from budhhub.boundary.db.models.module_model import ModuleModel
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.core.exceptions import InvalidRequestError
from budhhub.core.permissions import load_editable_course, load_editable_module

logger = logging.getLogger(__name__)


class ModuleService:
    """Module CRUD scoped to courses the caller owns."""

    def __init__(self, db: AsyncSession, storage: ObjectStorageClient) -> None:
        self.db = db
        self.storage = storage

    async def list_modules(self, course_id: UUID, user: UserModel) -> Sequence[ModuleModel]:
        await load_editable_course(self.db, course_id, user)
        return await module_crud.list_by_course(self.db, course_id)

    async def create_module(
        self,
        course_id: UUID,
        user: UserModel,
        title: str,
        ord: int | None = None,
    ) -> ModuleModel:
        """
        Add a module to an owned course.

        Args:
            course_id: Course UUID
            user: Caller
            title: Module title
            ord: Display order; appended after existing modules when None

        Returns:
            ModuleModel: Created module
        """
        await load_editable_course(self.db, course_id, user)
        if ord is None:
            ord = await module_crud.count_by_course(self.db, course_id)

        module = await module_crud.create(self.db, course_id=course_id, title=title, ord=ord)
        await self.db.commit()

        logger.info(
            "Module created",
            extra={"course_id": str(course_id), "module_id": str(module.id), "ord": ord},
        )
        return module

    async def get_module(self, course_id: UUID, module_id: UUID, user: UserModel) -> ModuleModel:
        _, module = await load_editable_module(self.db, course_id, module_id, user)
        return module

    async def update_module(
        self,
        course_id: UUID,
        module_id: UUID,
        user: UserModel,
        changes: dict[str, Any],
    ) -> ModuleModel:
        """
        Rename or reorder a module.

        Raises:
            InvalidRequestError: Nothing to update
        """
        _, module = await load_editable_module(self.db, course_id, module_id, user)
        changes = {field: value for field, value in changes.items() if value is not None}
        if not changes:
            raise InvalidRequestError("At least one field must be provided for update")

        module = await module_crud.update(self.db, module, **changes)
        await self.db.commit()
        return module

    async def delete_module(self, course_id: UUID, module_id: UUID, user: UserModel) -> None:
        """
        Delete a module with its lessons and recount the course's lessons.
        """
        _, module = await load_editable_module(self.db, course_id, module_id, user)

        lessons = await lesson_crud.list_by_module(self.db, module_id)
        await delete_lessons(self.db, self.storage, lessons)
        await module_crud.delete_by_id(self.db, module.id)
        await course_crud.recount_lessons(self.db, course_id)
        await self.db.commit()

        logger.info(
            "Module deleted",
            extra={
                "course_id": str(course_id),
                "module_id": str(module_id),
                "lesson_count": len(lessons),
            },
        )
