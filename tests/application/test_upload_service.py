"""
Test suite for UploadService.

System role: Verification of upload validation, ownership and key layout
"""

import uuid
from datetime import datetime, timezone

import pytest

from budhhub.application.services.upload_service import UploadService
from budhhub.boundary.db.models.material_model import MaterialType
from budhhub.configs.upload import UploadSettings
from budhhub.core.exceptions import InvalidRequestError, NotFoundError, PermissionDeniedError
from budhhub.core.roles import UserRole

ONE_MB = 1024 * 1024


@pytest.fixture
def upload_service(test_async_db, mock_storage) -> UploadService:
    settings = UploadSettings(max_video_size_mb=2, max_material_size_mb=1)
    return UploadService(db=test_async_db, storage=mock_storage, settings=settings)


class TestUploadThumbnail:
    """Test suite for UploadService.upload_thumbnail()."""

    @pytest.mark.asyncio
    async def test_upload_thumbnail_should_store_under_course_prefix(
        self, upload_service, make_user, make_course, mock_storage
    ) -> None:
        # Arrange
        instructor = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(instructor)

        # Act
        result = await upload_service.upload_thumbnail(
            instructor, "my cover.png", "image/png", b"png-bytes", course_id=course.id
        )

        # Assert
        assert result["key"].startswith(f"courses/{course.id}/thumbnails/")
        assert result["key"].endswith("-my_cover.png")
        assert result["url"] == f"https://cdn.example.com/{result['key']}"
        assert result["size"] == len(b"png-bytes")
        mock_storage.upload_file.assert_called_once_with(result["key"], b"png-bytes", "image/png")

    @pytest.mark.asyncio
    async def test_upload_thumbnail_without_course_should_use_temp_prefix(
        self, upload_service, make_user
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)

        result = await upload_service.upload_thumbnail(instructor, "a.png", "image/png", b"x")

        assert result["key"].startswith("temp/thumbnails/")

    @pytest.mark.asyncio
    async def test_upload_thumbnail_should_reject_non_image(
        self, upload_service, make_user, mock_storage
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)

        with pytest.raises(InvalidRequestError, match="Only images"):
            await upload_service.upload_thumbnail(instructor, "a.pdf", "application/pdf", b"x")
        mock_storage.upload_file.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_thumbnail_should_reject_learner(self, upload_service, make_user) -> None:
        learner = await make_user(UserRole.LEARNER)

        with pytest.raises(PermissionDeniedError):
            await upload_service.upload_thumbnail(learner, "a.png", "image/png", b"x")


class TestUploadVideo:
    """Test suite for UploadService.upload_video()."""

    @pytest.mark.asyncio
    async def test_upload_video_should_store_under_lesson_prefix(
        self, upload_service, make_user, make_course, make_module, make_lesson
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(instructor)
        lesson = await make_lesson(await make_module(course))

        result = await upload_service.upload_video(
            instructor, "intro.mp4", "video/mp4", b"frames", lesson_id=lesson.id
        )

        assert result["key"].startswith(f"lessons/{lesson.id}/videos/")
        assert result["type"] == "video/mp4"

    @pytest.mark.asyncio
    async def test_upload_video_should_enforce_size_limit(
        self, upload_service, make_user, mock_storage
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        body = b"0" * (2 * ONE_MB + 1)

        with pytest.raises(InvalidRequestError, match="Maximum size is 2MB"):
            await upload_service.upload_video(
                instructor, "big.mp4", "video/mp4", body, lesson_id=uuid.uuid4()
            )
        mock_storage.upload_file.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_video_should_raise_for_missing_lesson(
        self, upload_service, make_user
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)

        with pytest.raises(NotFoundError):
            await upload_service.upload_video(
                instructor, "a.mp4", "video/mp4", b"x", lesson_id=uuid.uuid4()
            )

    @pytest.mark.asyncio
    async def test_upload_video_should_forbid_other_instructor(
        self, upload_service, make_user, make_course, make_module, make_lesson
    ) -> None:
        owner = await make_user(UserRole.INSTRUCTOR)
        stranger = await make_user(UserRole.INSTRUCTOR)
        lesson = await make_lesson(await make_module(await make_course(owner)))

        with pytest.raises(PermissionDeniedError):
            await upload_service.upload_video(
                stranger, "a.mp4", "video/mp4", b"x", lesson_id=lesson.id
            )


class TestUploadMaterial:
    """Test suite for UploadService.upload_material()."""

    @pytest.mark.asyncio
    async def test_upload_material_should_classify_type(
        self, upload_service, make_user, make_course
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(instructor)

        result = await upload_service.upload_material(
            instructor, "notes.pdf", "application/pdf", b"%PDF", course_id=course.id
        )

        assert result["key"].startswith(f"courses/{course.id}/materials/")
        assert result["material_type"] is MaterialType.PDF

    @pytest.mark.asyncio
    async def test_upload_material_should_reject_disallowed_type(
        self, upload_service, make_user, make_course
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(instructor)

        with pytest.raises(InvalidRequestError, match="Invalid file type"):
            await upload_service.upload_material(
                instructor, "a.zip", "application/zip", b"PK", course_id=course.id
            )

    @pytest.mark.asyncio
    async def test_upload_material_should_reject_lesson_of_other_course(
        self, upload_service, make_user, make_course, make_module, make_lesson
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(instructor)
        other = await make_course(instructor, title="Other")
        foreign_lesson = await make_lesson(await make_module(other))

        with pytest.raises(PermissionDeniedError):
            await upload_service.upload_material(
                instructor,
                "a.pdf",
                "application/pdf",
                b"%PDF",
                course_id=course.id,
                lesson_id=foreign_lesson.id,
            )


class TestSignedUploadUrl:
    """Test suite for UploadService.create_signed_upload_url()."""

    @pytest.mark.asyncio
    async def test_create_signed_upload_url_should_return_expiry(
        self, upload_service, make_user, mock_storage
    ) -> None:
        # Arrange
        instructor = await make_user(UserRole.INSTRUCTOR)
        expires_at = datetime(2030, 1, 1, tzinfo=timezone.utc)
        mock_storage.generate_presigned_upload_url.return_value = ("https://put.example", expires_at)

        # Act
        result = await upload_service.create_signed_upload_url(
            instructor, "temp/a.png", "image/png"
        )

        # Assert
        assert result == {
            "url": "https://put.example",
            "key": "temp/a.png",
            "expires_in": 600,
            "expires_at": expires_at,
        }
        mock_storage.generate_presigned_upload_url.assert_called_once_with(
            "temp/a.png", content_type="image/png", expires_in=600
        )

    @pytest.mark.asyncio
    async def test_create_signed_upload_url_should_sign_owned_lesson_key(
        self, upload_service, make_user, make_course, make_module, make_lesson, mock_storage
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        lesson = await make_lesson(await make_module(await make_course(instructor)))
        key = f"lessons/{lesson.id}/videos/123-abc-lecture.mp4"
        mock_storage.generate_presigned_upload_url.return_value = (
            "https://put.example",
            datetime(2030, 1, 1, tzinfo=timezone.utc),
        )

        result = await upload_service.create_signed_upload_url(instructor, key, "video/mp4")

        assert result["key"] == key

    @pytest.mark.asyncio
    async def test_create_signed_upload_url_should_forbid_foreign_lesson_key(
        self, upload_service, make_user, make_course, make_module, make_lesson, mock_storage
    ) -> None:
        owner = await make_user(UserRole.INSTRUCTOR)
        stranger = await make_user(UserRole.INSTRUCTOR)
        lesson = await make_lesson(await make_module(await make_course(owner)))

        with pytest.raises(PermissionDeniedError):
            await upload_service.create_signed_upload_url(
                stranger, f"lessons/{lesson.id}/videos/123-abc-lecture.mp4", "video/mp4"
            )
        mock_storage.generate_presigned_upload_url.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_signed_upload_url_should_forbid_foreign_course_key(
        self, upload_service, make_user, make_course, mock_storage
    ) -> None:
        owner = await make_user(UserRole.INSTRUCTOR)
        stranger = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(owner)

        with pytest.raises(PermissionDeniedError):
            await upload_service.create_signed_upload_url(
                stranger, f"courses/{course.id}/materials/1-abc-notes.pdf"
            )
        mock_storage.generate_presigned_upload_url.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_signed_upload_url_should_raise_for_missing_course(
        self, upload_service, make_user
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)

        with pytest.raises(NotFoundError):
            await upload_service.create_signed_upload_url(
                instructor, f"courses/{uuid.uuid4()}/thumbnails/a.png"
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "key",
        ["", "other/a.png", "temp/", "courses/not-a-uuid/a.png", "lessons/a.mp4"],
    )
    async def test_create_signed_upload_url_should_reject_bad_keys(
        self, upload_service, make_user, key
    ) -> None:
        admin = await make_user(UserRole.ADMIN)

        with pytest.raises(InvalidRequestError):
            await upload_service.create_signed_upload_url(admin, key)

    @pytest.mark.asyncio
    async def test_create_signed_upload_url_should_reject_learner(
        self, upload_service, make_user
    ) -> None:
        learner = await make_user(UserRole.LEARNER)

        with pytest.raises(PermissionDeniedError):
            await upload_service.create_signed_upload_url(learner, "temp/a.png")
