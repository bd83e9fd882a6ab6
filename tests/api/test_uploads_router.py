import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import get_settings_dependency, get_upload_service
from budhhub.configs.upload import UploadSettings
from budhhub.core.exceptions import (
    InvalidRequestError,
    PermissionDeniedError,
    StorageNotConfiguredError,
)
from budhhub.core.roles import UserRole

from .conftest import fake_user


@pytest.fixture
def mock_upload_service():
    return AsyncMock()


def test_upload_thumbnail(client, mock_upload_service):
    instructor = fake_user(UserRole.INSTRUCTOR)
    course_id = uuid.uuid4()
    mock_upload_service.upload_thumbnail.return_value = {
        "key": f"courses/{course_id}/thumbnails/1-abc-cover.png",
        "url": f"https://cdn.example.com/courses/{course_id}/thumbnails/1-abc-cover.png",
        "filename": "cover.png",
        "size": 4,
        "type": "image/png",
    }
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: instructor

    response = client.post(
        "/api/v1/upload/thumbnail",
        files={"file": ("cover.png", b"\x89PNG", "image/png")},
        data={"course_id": str(course_id)},
    )

    assert response.status_code == 200
    assert response.json()["filename"] == "cover.png"
    kwargs = mock_upload_service.upload_thumbnail.call_args.kwargs
    assert kwargs["body"] == b"\x89PNG"
    assert kwargs["content_type"] == "image/png"
    assert kwargs["course_id"] == course_id


def test_upload_video_wrong_type(client, mock_upload_service):
    mock_upload_service.upload_video.side_effect = InvalidRequestError(
        "Invalid file type. Only videos are allowed."
    )
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: fake_user(UserRole.INSTRUCTOR)

    response = client.post(
        "/api/v1/upload/video",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        data={"lesson_id": str(uuid.uuid4())},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid file type. Only videos are allowed."


def test_upload_video_requires_lesson_id(client, mock_upload_service):
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: fake_user(UserRole.INSTRUCTOR)

    response = client.post(
        "/api/v1/upload/video",
        files={"file": ("v.mp4", b"frames", "video/mp4")},
    )

    assert response.status_code == 400
    mock_upload_service.upload_video.assert_not_called()


def test_upload_material_by_learner_is_forbidden(client, mock_upload_service):
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: fake_user(UserRole.LEARNER)

    response = client.post(
        "/api/v1/upload/material",
        files={"file": ("a.pdf", b"%PDF", "application/pdf")},
        data={"course_id": str(uuid.uuid4())},
    )

    assert response.status_code == 403


def test_upload_without_storage_returns_503(client, mock_upload_service):
    mock_upload_service.upload_material.side_effect = StorageNotConfiguredError()
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: fake_user(UserRole.INSTRUCTOR)

    response = client.post(
        "/api/v1/upload/material",
        files={"file": ("a.pdf", b"%PDF", "application/pdf")},
        data={"course_id": str(uuid.uuid4())},
    )

    assert response.status_code == 503


def test_signed_upload_url(client, mock_upload_service):
    instructor = fake_user(UserRole.INSTRUCTOR)
    mock_upload_service.create_signed_upload_url.return_value = {
        "url": "https://put.example/obj",
        "key": "temp/a.png",
        "expires_in": 600,
        "expires_at": datetime(2030, 1, 1, tzinfo=timezone.utc),
    }
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: instructor

    response = client.get(
        "/api/v1/upload/signed-url", params={"file": "temp/a.png", "content_type": "image/png"}
    )

    assert response.status_code == 200
    assert response.json()["expires_in"] == 600
    mock_upload_service.create_signed_upload_url.assert_awaited_once_with(
        instructor, "temp/a.png", "image/png"
    )


def test_signed_upload_url_for_foreign_lesson_is_forbidden(client, mock_upload_service):
    mock_upload_service.create_signed_upload_url.side_effect = PermissionDeniedError(
        "You do not have permission to modify this course"
    )
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: fake_user(UserRole.INSTRUCTOR)

    response = client.get(
        "/api/v1/upload/signed-url",
        params={"file": f"lessons/{uuid.uuid4()}/videos/1-abc-lecture.mp4"},
    )

    assert response.status_code == 403
    assert response.json() == {"error": "You do not have permission to modify this course"}


def test_upload_video_rejects_declared_oversize_before_service(client, mock_upload_service):
    client.app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    client.app.dependency_overrides[get_current_user] = lambda: fake_user(UserRole.INSTRUCTOR)
    client.app.dependency_overrides[get_settings_dependency] = lambda: SimpleNamespace(
        upload=UploadSettings(max_video_size_mb=1)
    )

    response = client.post(
        "/api/v1/upload/video",
        files={"file": ("big.mp4", b"0" * (1024 * 1024 + 1), "video/mp4")},
        data={"lesson_id": str(uuid.uuid4())},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "File too large. Maximum size is 1MB."}
    mock_upload_service.upload_video.assert_not_called()
