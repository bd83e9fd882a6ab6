"""
Study material API endpoints.

Routes (under /instructor/courses):
- GET/POST /{course_id}/materials - Course-level materials
- GET/PATCH/DELETE /{course_id}/materials/{material_id}
- GET/POST /{course_id}/modules/{module_id}/lessons/{lesson_id}/materials
- GET/PATCH/DELETE /{course_id}/modules/{module_id}/lessons/{lesson_id}/materials/{material_id}

Dependencies: budhhub.application.services, budhhub.models
System role: Material management HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import get_material_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.material_service import MaterialService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.models.common import MessageResponse
from budhhub.models.material import (
    CreateMaterialRequest,
    MaterialResponse,
    UpdateMaterialRequest,
)

from .instructor_responses import map_materials_to_response

router = APIRouter(prefix="/instructor/courses", tags=["instructor-materials"])

LESSON_MATERIALS_PATH = "/{course_id}/modules/{module_id}/lessons/{lesson_id}/materials"


@router.get("/{course_id}/materials", response_model=list[MaterialResponse])
@handle_service_errors
async def list_course_materials(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> list[MaterialResponse]:
    """List course-level materials, oldest first."""
    materials = await material_service.list_course_materials(course_id, user)
    return map_materials_to_response(materials)


@router.post("/{course_id}/materials", response_model=MaterialResponse, status_code=201)
@handle_service_errors
async def create_course_material(
    course_id: UUID,
    request: CreateMaterialRequest,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MaterialResponse:
    """
    Register an uploaded file as a course-level material.

    Raises:
        HTTPException(404): Course not found
        HTTPException(403): Not the owner
    """
    material = await material_service.create_course_material(
        course_id,
        user,
        request.model_dump(),
    )
    return MaterialResponse.model_validate(material)


@router.get("/{course_id}/materials/{material_id}", response_model=MaterialResponse)
@handle_service_errors
async def get_course_material(
    course_id: UUID,
    material_id: UUID,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MaterialResponse:
    material = await material_service.get_course_material(course_id, material_id, user)
    return MaterialResponse.model_validate(material)


@router.patch("/{course_id}/materials/{material_id}", response_model=MaterialResponse)
@handle_service_errors
async def update_course_material(
    course_id: UUID,
    material_id: UUID,
    request: UpdateMaterialRequest,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MaterialResponse:
    material = await material_service.update_course_material(
        course_id,
        material_id,
        user,
        request.model_dump(exclude_unset=True),
    )
    return MaterialResponse.model_validate(material)


@router.delete("/{course_id}/materials/{material_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_course_material(
    course_id: UUID,
    material_id: UUID,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MessageResponse:
    await material_service.delete_course_material(course_id, material_id, user)
    return MessageResponse(message="Material deleted successfully")


@router.get(LESSON_MATERIALS_PATH, response_model=list[MaterialResponse])
@handle_service_errors
async def list_lesson_materials(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> list[MaterialResponse]:
    materials = await material_service.list_lesson_materials(course_id, module_id, lesson_id, user)
    return map_materials_to_response(materials)


@router.post(LESSON_MATERIALS_PATH, response_model=MaterialResponse, status_code=201)
@handle_service_errors
async def create_lesson_material(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    request: CreateMaterialRequest,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MaterialResponse:
    """
    Register an uploaded file as a lesson material.

    Raises:
        HTTPException(404): Course, module or lesson not found
        HTTPException(403): Not the owner
    """
    material = await material_service.create_lesson_material(
        course_id,
        module_id,
        lesson_id,
        user,
        request.model_dump(),
    )
    return MaterialResponse.model_validate(material)


@router.get(LESSON_MATERIALS_PATH + "/{material_id}", response_model=MaterialResponse)
@handle_service_errors
async def get_lesson_material(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    material_id: UUID,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MaterialResponse:
    material = await material_service.get_lesson_material(
        course_id,
        module_id,
        lesson_id,
        material_id,
        user,
    )
    return MaterialResponse.model_validate(material)


@router.patch(LESSON_MATERIALS_PATH + "/{material_id}", response_model=MaterialResponse)
@handle_service_errors
async def update_lesson_material(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    material_id: UUID,
    request: UpdateMaterialRequest,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MaterialResponse:
    material = await material_service.update_lesson_material(
        course_id,
        module_id,
        lesson_id,
        material_id,
        user,
        request.model_dump(exclude_unset=True),
    )
    return MaterialResponse.model_validate(material)


@router.delete(LESSON_MATERIALS_PATH + "/{material_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_lesson_material(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    material_id: UUID,
    user: UserModel = Depends(get_current_user),
    material_service: MaterialService = Depends(get_material_service),
) -> MessageResponse:
    await material_service.delete_lesson_material(course_id, module_id, lesson_id, material_id, user)
    return MessageResponse(message="Material deleted successfully")
