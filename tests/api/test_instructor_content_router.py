import uuid
from unittest.mock import AsyncMock

import pytest

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import (
    get_lesson_service,
    get_material_service,
    get_module_service,
)
from budhhub.core.exceptions import InvalidRequestError, NotFoundError, PermissionDeniedError
from budhhub.core.roles import UserRole

from .conftest import fake_lesson, fake_material, fake_module, fake_user


@pytest.fixture
def instructor():
    return fake_user(UserRole.INSTRUCTOR)


@pytest.fixture
def ids():
    return {"course": uuid.uuid4(), "module": uuid.uuid4(), "lesson": uuid.uuid4()}


@pytest.fixture
def module_service(client, instructor):
    service = AsyncMock()
    client.app.dependency_overrides[get_module_service] = lambda: service
    client.app.dependency_overrides[get_current_user] = lambda: instructor
    return service


@pytest.fixture
def lesson_service(client, instructor):
    service = AsyncMock()
    client.app.dependency_overrides[get_lesson_service] = lambda: service
    client.app.dependency_overrides[get_current_user] = lambda: instructor
    return service


@pytest.fixture
def material_service(client, instructor):
    service = AsyncMock()
    client.app.dependency_overrides[get_material_service] = lambda: service
    client.app.dependency_overrides[get_current_user] = lambda: instructor
    return service


def _lesson_url(ids, suffix=""):
    return (
        f"/api/v1/instructor/courses/{ids['course']}/modules/{ids['module']}"
        f"/lessons/{ids['lesson']}{suffix}"
    )


# Modules


def test_create_module(client, instructor, ids, module_service):
    module_service.create_module.return_value = fake_module(ids["course"], title="Intro", ord=2)

    response = client.post(
        f"/api/v1/instructor/courses/{ids['course']}/modules", json={"title": "Intro"}
    )

    assert response.status_code == 201
    assert response.json()["title"] == "Intro"
    assert response.json()["ord"] == 2
    module_service.create_module.assert_awaited_once_with(ids["course"], instructor, "Intro", None)


def test_create_module_requires_title(client, ids, module_service):
    response = client.post(f"/api/v1/instructor/courses/{ids['course']}/modules", json={})

    assert response.status_code == 400
    module_service.create_module.assert_not_called()


def test_update_module_sends_only_present_fields(client, instructor, ids, module_service):
    module = fake_module(ids["course"], id=ids["module"], ord=3)
    module_service.update_module.return_value = module

    response = client.patch(
        f"/api/v1/instructor/courses/{ids['course']}/modules/{ids['module']}", json={"ord": 3}
    )

    assert response.status_code == 200
    assert response.json()["id"] == str(ids["module"])
    module_service.update_module.assert_awaited_once_with(
        ids["course"], ids["module"], instructor, {"ord": 3}
    )


def test_delete_module(client, instructor, ids, module_service):
    response = client.delete(f"/api/v1/instructor/courses/{ids['course']}/modules/{ids['module']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Module deleted successfully"}
    module_service.delete_module.assert_awaited_once_with(ids["course"], ids["module"], instructor)


def test_delete_module_of_foreign_course(client, ids, module_service):
    module_service.delete_module.side_effect = PermissionDeniedError(
        "You do not have permission to modify this course"
    )

    response = client.delete(f"/api/v1/instructor/courses/{ids['course']}/modules/{ids['module']}")

    assert response.status_code == 403


# Lessons


def test_create_lesson(client, ids, lesson_service):
    lesson_service.create_lesson.return_value = fake_lesson(ids["module"], title="Setup")

    response = client.post(
        f"/api/v1/instructor/courses/{ids['course']}/modules/{ids['module']}/lessons",
        json={"title": "Setup", "content": "Install Python"},
    )

    assert response.status_code == 201
    assert response.json()["module_id"] == str(ids["module"])
    fields = lesson_service.create_lesson.call_args.args[3]
    assert fields["title"] == "Setup"
    assert fields["content"] == "Install Python"


def test_update_lesson_can_clear_content(client, instructor, ids, lesson_service):
    lesson_service.update_lesson.return_value = fake_lesson(ids["module"], id=ids["lesson"])

    response = client.patch(_lesson_url(ids), json={"content": None})

    assert response.status_code == 200
    assert response.json()["content"] is None
    lesson_service.update_lesson.assert_awaited_once_with(
        ids["course"], ids["module"], ids["lesson"], instructor, {"content": None}
    )


def test_update_missing_lesson(client, ids, lesson_service):
    lesson_service.update_lesson.side_effect = NotFoundError("Lesson", ids["lesson"])

    response = client.patch(_lesson_url(ids), json={"title": "X"})

    assert response.status_code == 404
    assert response.json() == {"error": "Lesson not found"}


def test_delete_lesson(client, instructor, ids, lesson_service):
    response = client.delete(_lesson_url(ids))

    assert response.status_code == 200
    assert response.json() == {"message": "Lesson deleted successfully"}
    lesson_service.delete_lesson.assert_awaited_once_with(
        ids["course"], ids["module"], ids["lesson"], instructor
    )


def test_delete_lesson_video(client, ids, lesson_service):
    lesson_service.delete_lesson_video.return_value = fake_lesson(ids["module"], id=ids["lesson"])

    response = client.delete(_lesson_url(ids, "/video"))

    assert response.status_code == 200
    assert response.json()["video_key"] is None


def test_delete_lesson_video_without_video(client, ids, lesson_service):
    lesson_service.delete_lesson_video.side_effect = InvalidRequestError("No video to delete")

    response = client.delete(_lesson_url(ids, "/video"))

    assert response.status_code == 400
    assert response.json() == {"error": "No video to delete"}


# Lesson materials


def test_list_lesson_materials(client, instructor, ids, material_service):
    material_service.list_lesson_materials.return_value = [
        fake_material(ids["course"], ids["lesson"], file_name="slides.pdf")
    ]

    response = client.get(_lesson_url(ids, "/materials"))

    assert response.status_code == 200
    assert [m["file_name"] for m in response.json()] == ["slides.pdf"]
    assert response.json()[0]["lesson_id"] == str(ids["lesson"])
    material_service.list_lesson_materials.assert_awaited_once_with(
        ids["course"], ids["module"], ids["lesson"], instructor
    )


def test_create_lesson_material(client, ids, material_service):
    material_service.create_lesson_material.return_value = fake_material(
        ids["course"], ids["lesson"], file_name="slides.pdf"
    )

    response = client.post(
        _lesson_url(ids, "/materials"),
        json={
            "file_name": "slides.pdf",
            "file_key": f"lessons/{ids['lesson']}/materials/1-abc-slides.pdf",
            "file_type": "application/pdf",
            "file_size": 2048,
        },
    )

    assert response.status_code == 201
    assert response.json()["material_type"] == "pdf"
    fields = material_service.create_lesson_material.call_args.args[4]
    assert fields["file_key"] == f"lessons/{ids['lesson']}/materials/1-abc-slides.pdf"
    assert fields["material_type"] is None


def test_create_lesson_material_requires_file_key(client, ids, material_service):
    response = client.post(_lesson_url(ids, "/materials"), json={"file_name": "slides.pdf"})

    assert response.status_code == 400
    material_service.create_lesson_material.assert_not_called()


def test_get_lesson_material(client, ids, material_service):
    material = fake_material(ids["course"], ids["lesson"])
    material_service.get_lesson_material.return_value = material

    response = client.get(_lesson_url(ids, f"/materials/{material.id}"))

    assert response.status_code == 200
    assert response.json()["id"] == str(material.id)


def test_update_lesson_material(client, instructor, ids, material_service):
    material = fake_material(ids["course"], ids["lesson"], file_name="renamed.pdf")
    material_service.update_lesson_material.return_value = material

    response = client.patch(
        _lesson_url(ids, f"/materials/{material.id}"), json={"file_name": "renamed.pdf"}
    )

    assert response.status_code == 200
    assert response.json()["file_name"] == "renamed.pdf"
    material_service.update_lesson_material.assert_awaited_once_with(
        ids["course"],
        ids["module"],
        ids["lesson"],
        material.id,
        instructor,
        {"file_name": "renamed.pdf"},
    )


def test_delete_lesson_material(client, instructor, ids, material_service):
    material_id = uuid.uuid4()

    response = client.delete(_lesson_url(ids, f"/materials/{material_id}"))

    assert response.status_code == 200
    assert response.json() == {"message": "Material deleted successfully"}
    material_service.delete_lesson_material.assert_awaited_once_with(
        ids["course"], ids["module"], ids["lesson"], material_id, instructor
    )


def test_delete_lesson_material_from_other_lesson(client, ids, material_service):
    material_service.delete_lesson_material.side_effect = NotFoundError("Material")

    response = client.delete(_lesson_url(ids, f"/materials/{uuid.uuid4()}"))

    assert response.status_code == 404
