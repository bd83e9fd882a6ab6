"""
Course service orchestrator.

Coordinates the instructor side of the course lifecycle: creation,
editing, publishing and deletion with storage cleanup.

Dependencies: budhhub.boundary.db.CRUD, budhhub.boundary.storage, budhhub.boundary.cache
System role: Course use case orchestration
"""

import logging
from decimal import Decimal
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.application.services.content_cleanup import delete_lessons
from budhhub.boundary.cache.redis_cache import CATALOG_FILTERS_KEY, RedisCache
from budhhub.boundary.db.CRUD.course_crud import course_crud
from budhhub.boundary.db.CRUD.enrollment_crud import enrollment_crud, lesson_progress_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.CRUD.material_crud import material_crud
from budhhub.boundary.db.CRUD.module_crud import module_crud
from budhhub.boundary.db.models.course_model import CourseModel
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.boundary.storage.storage_keys import thumbnail_key_from_url
from budhhub.core.exceptions import InvalidRequestError, PermissionDeniedError
from budhhub.core.permissions import is_instructor_or_above, load_editable_course

logger = logging.getLogger(__name__)

# Columns a PATCH may not null out
NON_NULLABLE_FIELDS = {"title", "price"}


def require_instructor_role(user: UserModel) -> None:
    """
    Raises:
        PermissionDeniedError: User is below INSTRUCTOR
    """
    if not is_instructor_or_above(user):
        raise PermissionDeniedError("Only instructors can manage courses")


class CourseService:
    """Course service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        storage: ObjectStorageClient,
        cache: RedisCache,
    ) -> None:
        """
        Initialize course service.

        Args:
            db: Async SQLAlchemy session
            storage: Object storage client used for thumbnail cleanup
            cache: Cache holding catalog facets invalidated on change
        """
        self.db = db
        self.storage = storage
        self.cache = cache

    async def list_instructor_courses(self, user: UserModel) -> Sequence[CourseModel]:
        """
        List the caller's courses, newest first.

        Raises:
            PermissionDeniedError: Caller is not an instructor
        """
        require_instructor_role(user)
        return await course_crud.list_by_instructor(self.db, user.id)

    async def create_course(
        self,
        user: UserModel,
        title: str,
        description: str | None = None,
        category: str | None = None,
        difficulty: str | None = None,
        thumbnail_url: str | None = None,
        price: float | None = None,
    ) -> CourseModel:
        """
        Create an unpublished course owned by the caller.

        Args:
            user: Creating instructor
            title: Course title
            description: Optional description
            category: Optional category
            difficulty: Optional difficulty
            thumbnail_url: Optional thumbnail URL
            price: Optional price (defaults to 0)

        Returns:
            CourseModel: Created course

        Raises:
            PermissionDeniedError: Caller is not an instructor
        """
        require_instructor_role(user)
        try:
            course = await course_crud.create(
                self.db,
                instructor_id=user.id,
                title=title,
                description=description,
                category=category,
                difficulty=difficulty,
                thumbnail_url=thumbnail_url,
                price=Decimal(str(price)) if price is not None else Decimal("0"),
                is_published=False,
                total_lessons=0,
            )
            await self.db.commit()
        except Exception as e:
            logger.error(
                "Failed to create course",
                extra={"error": str(e), "course_title": title, "user_id": str(user.id)},
            )
            raise

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "course_title": title},
        )
        return course

    async def get_course(self, course_id: UUID, user: UserModel) -> CourseModel:
        """
        Get an owned course.

        Raises:
            NotFoundError: Course does not exist
            PermissionDeniedError: Caller is not the owner
        """
        return await load_editable_course(self.db, course_id, user)

    async def update_course(
        self,
        course_id: UUID,
        user: UserModel,
        changes: dict[str, Any],
    ) -> CourseModel:
        """
        Apply a partial update to an owned course.

        Args:
            course_id: Course UUID
            user: Caller
            changes: Field values explicitly sent by the client

        Returns:
            CourseModel: Updated course

        Raises:
            InvalidRequestError: Nothing to update
            NotFoundError: Course does not exist
            PermissionDeniedError: Caller is not the owner
        """
        course = await load_editable_course(self.db, course_id, user)
        changes = {
            field: value
            for field, value in changes.items()
            if value is not None or field not in NON_NULLABLE_FIELDS
        }
        if not changes:
            raise InvalidRequestError("At least one field must be provided for update")
        if changes.get("price") is not None:
            changes["price"] = Decimal(str(changes["price"]))

        course = await course_crud.update(self.db, course, **changes)
        await self.db.commit()
        await self.cache.delete(CATALOG_FILTERS_KEY)

        logger.info(
            "Course updated",
            extra={"course_id": str(course_id), "fields": sorted(changes)},
        )
        return course

    async def set_published(
        self,
        course_id: UUID,
        user: UserModel,
        is_published: bool,
    ) -> CourseModel:
        """
        Publish or unpublish an owned course.

        Returns:
            CourseModel: Course with the new publish state
        """
        course = await load_editable_course(self.db, course_id, user)
        course = await course_crud.update(self.db, course, is_published=is_published)
        await self.db.commit()
        await self.cache.delete(CATALOG_FILTERS_KEY)

        logger.info(
            "Course publish state changed",
            extra={"course_id": str(course_id), "is_published": is_published},
        )
        return course

    async def delete_course(self, course_id: UUID, user: UserModel) -> None:
        """
        Delete an owned course and everything under it.

        Stored files (thumbnail, lesson videos, materials) are removed
        best-effort; a storage failure never blocks the row deletion.

        Raises:
            NotFoundError: Course does not exist
            PermissionDeniedError: Caller is not the owner
        """
        course = await load_editable_course(self.db, course_id, user)

        if course.thumbnail_url:
            key = thumbnail_key_from_url(course_id, course.thumbnail_url)
            self.storage.delete_quietly(key, course_id=str(course_id))

        lessons = await lesson_crud.list_by_course(self.db, course_id)
        await delete_lessons(self.db, self.storage, lessons)

        for material in await material_crud.list_by_course(self.db, course_id):
            self.storage.delete_quietly(material.file_key, material_id=str(material.id))
        await material_crud.delete_by_course(self.db, course_id)

        await lesson_progress_crud.delete_by_course(self.db, course_id)
        await enrollment_crud.delete_by_course(self.db, course_id)
        await module_crud.delete_by_course(self.db, course_id)
        await course_crud.delete_course(self.db, course_id)
        await self.db.commit()
        await self.cache.delete(CATALOG_FILTERS_KEY)

        logger.info(
            "Course deleted",
            extra={"course_id": str(course_id), "lesson_count": len(lessons)},
        )
