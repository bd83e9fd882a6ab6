import time
import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import jwt
import pytest

from budhhub.api.deps.dependencies import get_user_service
from budhhub.core.roles import UserRole

from .conftest import fake_user

SECRET = "test-secret"


@pytest.fixture(autouse=True)
def auth_secret():
    settings = SimpleNamespace(auth=SimpleNamespace(secret=SECRET, algorithm="HS256"))
    with patch("budhhub.api.deps.auth.get_settings", return_value=settings):
        yield


@pytest.fixture
def mock_user_service():
    return AsyncMock()


def _token(**claims) -> str:
    payload = {"sub": str(uuid.uuid4()), "email": "ada@example.com", "exp": time.time() + 60}
    payload.update(claims)
    return jwt.encode(payload, SECRET, algorithm="HS256")


def test_valid_token_resolves_caller(client, mock_user_service):
    user = fake_user(UserRole.LEARNER, name="Ada")
    mock_user_service.resolve_identity.return_value = user
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.get(
        "/api/v1/onboarding/me", headers={"Authorization": f"Bearer {_token()}"}
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Ada"
    claims = mock_user_service.resolve_identity.call_args.args[0]
    assert claims["email"] == "ada@example.com"


def test_missing_token_is_unauthorized(client, mock_user_service):
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.get("/api/v1/onboarding/me")

    assert response.status_code == 401


def test_expired_token_is_unauthorized(client, mock_user_service):
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.get(
        "/api/v1/onboarding/me",
        headers={"Authorization": f"Bearer {_token(exp=time.time() - 60)}"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Token has expired"


def test_tampered_token_is_unauthorized(client, mock_user_service):
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service
    forged = jwt.encode({"sub": "x", "email": "a@example.com"}, "other-secret", algorithm="HS256")

    response = client.get(
        "/api/v1/onboarding/me", headers={"Authorization": f"Bearer {forged}"}
    )

    assert response.status_code == 401
    mock_user_service.resolve_identity.assert_not_called()


def test_learner_cannot_list_instructor_courses(client, mock_user_service):
    mock_user_service.resolve_identity.return_value = fake_user(UserRole.LEARNER)
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.get(
        "/api/v1/instructor/courses", headers={"Authorization": f"Bearer {_token()}"}
    )

    assert response.status_code == 403
