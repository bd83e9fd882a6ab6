"""
Study material service orchestrator.

Materials hang either off a course (course-level) or off one of its
lessons. Files are uploaded first through the upload endpoints; this
service registers, edits and removes the rows.

Dependencies: budhhub.boundary.db.CRUD, budhhub.boundary.storage
System role: Material use case orchestration
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.material_crud import material_crud
from budhhub.boundary.db.models.material_model import MaterialModel, MaterialType
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.core.exceptions import InvalidRequestError, NotFoundError
from budhhub.core.permissions import load_editable_course, load_editable_lesson

logger = logging.getLogger(__name__)


def _prepare_fields(fields: dict[str, Any]) -> dict[str, Any]:
    fields = dict(fields)
    if fields.get("material_type") is None:
        fields["material_type"] = MaterialType.from_mime_type(fields.get("file_type"))
    return fields


def _prepare_changes(changes: dict[str, Any]) -> dict[str, Any]:
    changes = {field: value for field, value in changes.items() if value is not None}
    if not changes:
        raise InvalidRequestError("At least one field must be provided for update")
    return changes


class MaterialService:
    """Course-level and lesson-level material management for course owners."""

    def __init__(self, db: AsyncSession, storage: ObjectStorageClient) -> None:
        self.db = db
        self.storage = storage

    async def _get_course_material(self, course_id: UUID, material_id: UUID) -> MaterialModel:
        material = await material_crud.get_course_level(self.db, material_id, course_id)
        if material is None:
            raise NotFoundError("Material", material_id)
        return material

    async def _get_lesson_material(self, lesson_id: UUID, material_id: UUID) -> MaterialModel:
        material = await material_crud.get_for_lesson(self.db, material_id, lesson_id)
        if material is None:
            raise NotFoundError("Material", material_id)
        return material

    async def _delete(self, material: MaterialModel) -> None:
        self.storage.delete_quietly(material.file_key, material_id=str(material.id))
        await material_crud.delete_by_id(self.db, material.id)
        await self.db.commit()
        logger.info(
            "Material deleted",
            extra={"material_id": str(material.id), "course_id": str(material.course_id)},
        )

    # Course-level

    async def list_course_materials(
        self,
        course_id: UUID,
        user: UserModel,
    ) -> Sequence[MaterialModel]:
        await load_editable_course(self.db, course_id, user)
        return await material_crud.list_course_level(self.db, course_id)

    async def create_course_material(
        self,
        course_id: UUID,
        user: UserModel,
        fields: dict[str, Any],
    ) -> MaterialModel:
        """
        Register an uploaded file as a course-level material.

        Args:
            course_id: Course UUID
            user: Caller, must own the course
            fields: file_name, file_key, file_type, file_size, material_type

        Returns:
            MaterialModel: Created material
        """
        await load_editable_course(self.db, course_id, user)
        material = await material_crud.create(
            self.db,
            course_id=course_id,
            lesson_id=None,
            **_prepare_fields(fields),
        )
        await self.db.commit()

        logger.info(
            "Course material created",
            extra={"course_id": str(course_id), "material_id": str(material.id)},
        )
        return material

    async def get_course_material(
        self,
        course_id: UUID,
        material_id: UUID,
        user: UserModel,
    ) -> MaterialModel:
        await load_editable_course(self.db, course_id, user)
        return await self._get_course_material(course_id, material_id)

    async def update_course_material(
        self,
        course_id: UUID,
        material_id: UUID,
        user: UserModel,
        changes: dict[str, Any],
    ) -> MaterialModel:
        await load_editable_course(self.db, course_id, user)
        material = await self._get_course_material(course_id, material_id)
        changes = _prepare_changes(changes)
        material = await material_crud.update(self.db, material, **changes)
        await self.db.commit()
        return material

    async def delete_course_material(
        self,
        course_id: UUID,
        material_id: UUID,
        user: UserModel,
    ) -> None:
        await load_editable_course(self.db, course_id, user)
        material = await self._get_course_material(course_id, material_id)
        await self._delete(material)

    # Lesson-level

    async def list_lesson_materials(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        user: UserModel,
    ) -> Sequence[MaterialModel]:
        await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        return await material_crud.list_for_lessons(self.db, [lesson_id])

    async def create_lesson_material(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        user: UserModel,
        fields: dict[str, Any],
    ) -> MaterialModel:
        """
        Register an uploaded file as a material of one lesson.

        Raises:
            NotFoundError: Course, module or lesson missing or mismatched
            PermissionDeniedError: Not the owner
        """
        await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        material = await material_crud.create(
            self.db,
            course_id=course_id,
            lesson_id=lesson_id,
            **_prepare_fields(fields),
        )
        await self.db.commit()

        logger.info(
            "Lesson material created",
            extra={
                "course_id": str(course_id),
                "lesson_id": str(lesson_id),
                "material_id": str(material.id),
            },
        )
        return material

    async def get_lesson_material(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        material_id: UUID,
        user: UserModel,
    ) -> MaterialModel:
        await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        return await self._get_lesson_material(lesson_id, material_id)

    async def update_lesson_material(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        material_id: UUID,
        user: UserModel,
        changes: dict[str, Any],
    ) -> MaterialModel:
        await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        material = await self._get_lesson_material(lesson_id, material_id)
        changes = _prepare_changes(changes)
        material = await material_crud.update(self.db, material, **changes)
        await self.db.commit()
        return material

    async def delete_lesson_material(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        material_id: UUID,
        user: UserModel,
    ) -> None:
        await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        material = await self._get_lesson_material(lesson_id, material_id)
        await self._delete(material)
