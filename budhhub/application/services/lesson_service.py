"""
Lesson service orchestrator.

Every mutation that adds or removes lessons recomputes the course's
``total_lessons`` inside the same transaction.

Dependencies: budhhub.boundary.db.CRUD, budhhub.boundary.storage
System role: Lesson use case orchestration
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.application.services.content_cleanup import delete_lessons
from budhhub.boundary.db.CRUD.course_crud import course_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.models.lesson_model import LessonModel
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.core.exceptions import InvalidRequestError, NotFoundError
from budhhub.core.permissions import (
    load_course_lesson,
    load_editable_course,
    load_editable_lesson,
    load_editable_module,
)

logger = logging.getLogger(__name__)

VIDEO_FIELDS = ("video_key", "video_size", "video_duration", "video_mime_type")

# Columns a PATCH may not null out
NON_NULLABLE_FIELDS = {"title", "ord"}


class LessonService:
    """Lesson CRUD scoped to modules of courses the caller owns."""

    def __init__(self, db: AsyncSession, storage: ObjectStorageClient) -> None:
        """
        Initialize lesson service.

        Args:
            db: Async SQLAlchemy session
            storage: Object storage client for video cleanup and URLs
        """
        self.db = db
        self.storage = storage

    async def list_lessons(
        self,
        course_id: UUID,
        module_id: UUID,
        user: UserModel,
    ) -> Sequence[LessonModel]:
        await load_editable_module(self.db, course_id, module_id, user)
        return await lesson_crud.list_by_module(self.db, module_id)

    async def create_lesson(
        self,
        course_id: UUID,
        module_id: UUID,
        user: UserModel,
        fields: dict[str, Any],
    ) -> LessonModel:
        """
        Add a lesson to a module and recount the course's lessons.

        Args:
            course_id: Course UUID
            module_id: Module UUID
            user: Caller
            fields: Lesson columns; ``ord`` defaults to the module's lesson count

        Returns:
            LessonModel: Created lesson
        """
        await load_editable_module(self.db, course_id, module_id, user)

        fields = dict(fields)
        if fields.get("ord") is None:
            fields["ord"] = await lesson_crud.count_by_module(self.db, module_id)

        lesson = await lesson_crud.create(self.db, module_id=module_id, **fields)
        await course_crud.recount_lessons(self.db, course_id)
        await self.db.commit()

        logger.info(
            "Lesson created",
            extra={
                "course_id": str(course_id),
                "module_id": str(module_id),
                "lesson_id": str(lesson.id),
            },
        )
        return lesson

    async def get_lesson(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        user: UserModel,
    ) -> LessonModel:
        _, _, lesson = await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        return lesson

    async def update_lesson(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        user: UserModel,
        changes: dict[str, Any],
    ) -> LessonModel:
        """
        Apply a partial update to a lesson.

        Raises:
            InvalidRequestError: Nothing to update
        """
        _, _, lesson = await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        changes = {
            field: value
            for field, value in changes.items()
            if value is not None or field not in NON_NULLABLE_FIELDS
        }
        if not changes:
            raise InvalidRequestError("At least one field must be provided for update")

        lesson = await lesson_crud.update(self.db, lesson, **changes)
        await self.db.commit()
        return lesson

    async def delete_lesson(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        user: UserModel,
    ) -> None:
        """
        Delete a lesson, its files and rows, then recount in one transaction.
        """
        _, _, lesson = await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)

        await delete_lessons(self.db, self.storage, [lesson])
        await course_crud.recount_lessons(self.db, course_id)
        await self.db.commit()

        logger.info(
            "Lesson deleted",
            extra={"course_id": str(course_id), "lesson_id": str(lesson_id)},
        )

    async def delete_lesson_video(
        self,
        course_id: UUID,
        module_id: UUID,
        lesson_id: UUID,
        user: UserModel,
    ) -> LessonModel:
        """
        Remove a lesson's video file and clear its video fields.

        Raises:
            InvalidRequestError: Lesson has no video
        """
        _, _, lesson = await load_editable_lesson(self.db, course_id, module_id, lesson_id, user)
        if not lesson.video_key:
            raise InvalidRequestError("No video to delete")

        self.storage.delete_quietly(lesson.video_key, lesson_id=str(lesson_id))
        lesson = await lesson_crud.update(self.db, lesson, **{field: None for field in VIDEO_FIELDS})
        await self.db.commit()

        logger.info("Lesson video removed", extra={"lesson_id": str(lesson_id)})
        return lesson

    async def get_video_url(self, course_id: UUID, lesson_id: UUID, user: UserModel) -> str:
        """
        Playback URL of a lesson video for the course owner.

        Raises:
            NotFoundError: Course, lesson or video missing
            PermissionDeniedError: Not the owner, or lesson outside the course
        """
        await load_editable_course(self.db, course_id, user)
        lesson = await load_course_lesson(self.db, course_id, lesson_id)
        if not lesson.video_key:
            raise NotFoundError("Video", message="No video found for this lesson")
        return self.storage.get_access_url(lesson.video_key)
