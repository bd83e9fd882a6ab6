"""
API test fixtures.

Provides: TestClient over create_app(), fake users, courses, modules, lessons and materials
Dependencies: fastapi, pytest
System role: HTTP-level test infrastructure
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from budhhub.api.main import create_app
from budhhub.boundary.db.models.material_model import MaterialType
from budhhub.core.roles import UserRole


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


def fake_user(role: UserRole = UserRole.LEARNER, **fields) -> SimpleNamespace:
    values = {
        "id": uuid.uuid4(),
        "name": "Test User",
        "email": "user@example.com",
        "image": None,
        "bio": None,
        "role": role,
        "created_at": datetime.now(timezone.utc),
    }
    values.update(fields)
    return SimpleNamespace(**values)


def fake_course(instructor_id: uuid.UUID | None = None, **fields) -> SimpleNamespace:
    now = datetime.now(timezone.utc)
    values = {
        "id": uuid.uuid4(),
        "instructor_id": instructor_id or uuid.uuid4(),
        "title": "Test Course",
        "description": None,
        "category": None,
        "difficulty": None,
        "thumbnail_url": None,
        "price": Decimal("0"),
        "is_published": False,
        "total_lessons": 0,
        "created_at": now,
        "updated_at": now,
    }
    values.update(fields)
    return SimpleNamespace(**values)


def fake_module(course_id: uuid.UUID | None = None, **fields) -> SimpleNamespace:
    now = datetime.now(timezone.utc)
    values = {
        "id": uuid.uuid4(),
        "course_id": course_id or uuid.uuid4(),
        "title": "Test Module",
        "ord": 0,
        "created_at": now,
        "updated_at": now,
    }
    values.update(fields)
    return SimpleNamespace(**values)


def fake_lesson(module_id: uuid.UUID | None = None, **fields) -> SimpleNamespace:
    now = datetime.now(timezone.utc)
    values = {
        "id": uuid.uuid4(),
        "module_id": module_id or uuid.uuid4(),
        "title": "Test Lesson",
        "content": None,
        "video_key": None,
        "video_size": None,
        "video_duration": None,
        "video_mime_type": None,
        "ord": 0,
        "created_at": now,
        "updated_at": now,
    }
    values.update(fields)
    return SimpleNamespace(**values)


def fake_material(course_id: uuid.UUID, lesson_id: uuid.UUID | None = None, **fields):
    values = {
        "id": uuid.uuid4(),
        "course_id": course_id,
        "lesson_id": lesson_id,
        "file_name": "notes.pdf",
        "file_key": f"courses/{course_id}/materials/1-abc-notes.pdf",
        "file_type": "application/pdf",
        "file_size": 1024,
        "material_type": MaterialType.PDF,
        "created_at": datetime.now(timezone.utc),
    }
    values.update(fields)
    return SimpleNamespace(**values)
