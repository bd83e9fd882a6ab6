"""
Upload service orchestrator.

Validates files sent through the API, checks that the caller owns the
target course, then proxies the bytes to object storage. Also issues
presigned PUT URLs for direct browser uploads.

Dependencies: budhhub.boundary.storage, budhhub.boundary.db.CRUD
System role: File upload orchestration
"""

import asyncio
import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.models.material_model import MaterialType
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.boundary.storage import storage_keys
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.configs.upload import UploadSettings
from budhhub.core.exceptions import InvalidRequestError, NotFoundError, PermissionDeniedError
from budhhub.core.permissions import is_instructor_or_above, load_editable_course

logger = logging.getLogger(__name__)

ALLOWED_MATERIAL_TYPES = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "text/plain",
    }
)


def _size_mb(limit_bytes: int) -> int:
    return limit_bytes // (1024 * 1024)


class UploadService:
    """Proxied uploads and presigned upload URLs for instructors."""

    def __init__(
        self,
        db: AsyncSession,
        storage: ObjectStorageClient,
        settings: UploadSettings,
    ) -> None:
        """
        Initialize upload service.

        Args:
            db: Async SQLAlchemy session used for ownership checks
            storage: Object storage client
            settings: Upload size limits
        """
        self.db = db
        self.storage = storage
        self.settings = settings

    def _require_instructor(self, user: UserModel) -> None:
        if not is_instructor_or_above(user):
            raise PermissionDeniedError("Only instructors can upload files")

    async def _check_lesson_owner(self, lesson_id: UUID, user: UserModel) -> UUID:
        found = await lesson_crud.get_with_course_id(self.db, lesson_id)
        if found is None:
            raise NotFoundError("Lesson", lesson_id)
        _, course_id = found
        await load_editable_course(self.db, course_id, user)
        return course_id

    async def _store(
        self,
        key: str,
        filename: str,
        content_type: str,
        body: bytes,
    ) -> dict[str, Any]:
        await asyncio.to_thread(self.storage.upload_file, key, body, content_type)
        return {
            "key": key,
            "url": self.storage.get_public_url(key),
            "filename": filename,
            "size": len(body),
            "type": content_type,
        }

    async def upload_thumbnail(
        self,
        user: UserModel,
        filename: str,
        content_type: str | None,
        body: bytes,
        course_id: UUID | None = None,
    ) -> dict[str, Any]:
        """
        Upload a course thumbnail.

        Args:
            user: Caller
            filename: Client file name
            content_type: Client MIME type, must be image/*
            body: File bytes
            course_id: Owning course; the key goes under temp/ when None

        Returns:
            dict: key, url, filename, size, type

        Raises:
            InvalidRequestError: Not an image, or too large
            NotFoundError / PermissionDeniedError: Course checks failed
        """
        self._require_instructor(user)
        if not content_type or not content_type.startswith("image/"):
            raise InvalidRequestError("Invalid file type. Only images are allowed.")
        limit = self.settings.max_material_size_bytes
        if len(body) > limit:
            raise InvalidRequestError(f"File too large. Maximum size is {_size_mb(limit)}MB.")
        if course_id is not None:
            await load_editable_course(self.db, course_id, user)

        key = storage_keys.thumbnail_key(course_id, filename)
        result = await self._store(key, filename, content_type, body)
        logger.info(
            "Thumbnail uploaded",
            extra={"key": key, "course_id": str(course_id) if course_id else None},
        )
        return result

    async def upload_video(
        self,
        user: UserModel,
        filename: str,
        content_type: str | None,
        body: bytes,
        lesson_id: UUID,
    ) -> dict[str, Any]:
        """
        Upload a lesson video.

        Raises:
            InvalidRequestError: Not a video, or above the video size limit
            NotFoundError: Lesson missing
            PermissionDeniedError: Caller does not own the lesson's course
        """
        self._require_instructor(user)
        if not content_type or not content_type.startswith("video/"):
            raise InvalidRequestError("Invalid file type. Only videos are allowed.")
        limit = self.settings.max_video_size_bytes
        if len(body) > limit:
            raise InvalidRequestError(f"File too large. Maximum size is {_size_mb(limit)}MB.")
        await self._check_lesson_owner(lesson_id, user)

        key = storage_keys.video_key(lesson_id, filename)
        result = await self._store(key, filename, content_type, body)
        logger.info("Video uploaded", extra={"key": key, "lesson_id": str(lesson_id)})
        return result

    async def upload_material(
        self,
        user: UserModel,
        filename: str,
        content_type: str | None,
        body: bytes,
        course_id: UUID,
        lesson_id: UUID | None = None,
        material_id: UUID | None = None,
    ) -> dict[str, Any]:
        """
        Upload a study material file.

        Returns:
            dict: key, url, filename, size, type, material_type

        Raises:
            InvalidRequestError: MIME type not allowed, or too large
            NotFoundError / PermissionDeniedError: Course or lesson checks failed
        """
        self._require_instructor(user)
        if content_type not in ALLOWED_MATERIAL_TYPES:
            raise InvalidRequestError(
                "Invalid file type. Allowed: images, PDF, Word documents, text files.",
                details={"content_type": content_type},
            )
        limit = self.settings.max_material_size_bytes
        if len(body) > limit:
            raise InvalidRequestError(f"File too large. Maximum size is {_size_mb(limit)}MB.")

        await load_editable_course(self.db, course_id, user)
        if lesson_id is not None:
            lesson_course_id = await self._check_lesson_owner(lesson_id, user)
            if lesson_course_id != course_id:
                raise PermissionDeniedError(
                    "Lesson does not belong to this course",
                    details={"course_id": str(course_id), "lesson_id": str(lesson_id)},
                )

        key = storage_keys.material_key(course_id, filename, lesson_id, material_id)
        result = await self._store(key, filename, content_type, body)
        result["material_type"] = MaterialType.from_mime_type(content_type)
        logger.info(
            "Material uploaded",
            extra={"key": key, "course_id": str(course_id), "size": len(body)},
        )
        return result

    async def _check_key_owner(self, key: str, user: UserModel) -> None:
        scope, _, rest = key.partition("/")
        if scope == "temp" and rest:
            return
        owner_id, sep, _ = rest.partition("/")
        if scope not in ("courses", "lessons") or not sep:
            raise InvalidRequestError(
                "File key must start with temp/, courses/{id}/ or lessons/{id}/",
                details={"key": key},
            )
        try:
            owner_uuid = UUID(owner_id)
        except ValueError as e:
            raise InvalidRequestError("Invalid id in file key", details={"key": key}) from e
        if scope == "courses":
            await load_editable_course(self.db, owner_uuid, user)
        else:
            await self._check_lesson_owner(owner_uuid, user)

    async def create_signed_upload_url(
        self,
        user: UserModel,
        key: str,
        content_type: str | None = None,
    ) -> dict[str, Any]:
        """
        Presigned PUT URL for a direct browser upload.

        Keys under ``courses/{id}/`` or ``lessons/{id}/`` are only signed for
        the owner of that course; ``temp/`` keys for any instructor.

        Args:
            user: Caller
            key: Object key the client will write
            content_type: MIME type the client must send

        Returns:
            dict: url, key, expires_in, expires_at

        Raises:
            InvalidRequestError: Missing key or unknown key prefix
            NotFoundError / PermissionDeniedError: Course or lesson checks failed
        """
        self._require_instructor(user)
        if not key:
            raise InvalidRequestError("File key is required")
        await self._check_key_owner(key, user)

        expires_in = self.storage.upload_url_expiry
        url, expires_at = self.storage.generate_presigned_upload_url(
            key,
            content_type=content_type,
            expires_in=expires_in,
        )
        logger.info("Signed upload URL issued", extra={"key": key, "user_id": str(user.id)})
        return {"url": url, "key": key, "expires_in": expires_in, "expires_at": expires_at}
