import uuid
from unittest.mock import AsyncMock

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import (
    get_course_service,
    get_enrollment_service,
    get_user_service,
)
from budhhub.core.exceptions import NotFoundError
from budhhub.core.roles import UserRole

from .conftest import fake_user


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_domain_error_uses_error_envelope(client):
    course_service = AsyncMock()
    course_service.get_course.side_effect = NotFoundError("Course")
    client.app.dependency_overrides[get_course_service] = lambda: course_service
    client.app.dependency_overrides[get_current_user] = lambda: fake_user(UserRole.INSTRUCTOR)

    response = client.get(f"/api/v1/instructor/courses/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"error": "Course not found"}


def test_missing_credentials_keep_bearer_challenge(client):
    client.app.dependency_overrides[get_user_service] = lambda: AsyncMock()
    client.app.dependency_overrides[get_enrollment_service] = lambda: AsyncMock()

    response = client.get("/api/v1/my-courses")

    assert response.status_code == 401
    assert set(response.json()) == {"error"}
    assert response.headers["WWW-Authenticate"] == "Bearer"
