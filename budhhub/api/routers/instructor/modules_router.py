"""
Module API endpoints.

Routes (under /instructor/courses):
- GET /{course_id}/modules - List modules
- POST /{course_id}/modules - Create module
- GET /{course_id}/modules/{module_id} - Get module
- PATCH /{course_id}/modules/{module_id} - Update module
- DELETE /{course_id}/modules/{module_id} - Delete module and its lessons

Dependencies: budhhub.application.services, budhhub.models
System role: Module management HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import get_module_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.module_service import ModuleService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.models.common import MessageResponse
from budhhub.models.module import CreateModuleRequest, ModuleResponse, UpdateModuleRequest

from .instructor_responses import map_modules_to_response

router = APIRouter(prefix="/instructor/courses", tags=["instructor-modules"])


@router.get("/{course_id}/modules", response_model=list[ModuleResponse])
@handle_service_errors
async def list_modules(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    module_service: ModuleService = Depends(get_module_service),
) -> list[ModuleResponse]:
    modules = await module_service.list_modules(course_id, user)
    return map_modules_to_response(modules)


@router.post("/{course_id}/modules", response_model=ModuleResponse, status_code=201)
@handle_service_errors
async def create_module(
    course_id: UUID,
    request: CreateModuleRequest,
    user: UserModel = Depends(get_current_user),
    module_service: ModuleService = Depends(get_module_service),
) -> ModuleResponse:
    """
    Add a module to an owned course.

    Raises:
        HTTPException(404): Course not found
        HTTPException(403): Not the owner
    """
    module = await module_service.create_module(course_id, user, request.title, request.ord)
    return ModuleResponse.model_validate(module)


@router.get("/{course_id}/modules/{module_id}", response_model=ModuleResponse)
@handle_service_errors
async def get_module(
    course_id: UUID,
    module_id: UUID,
    user: UserModel = Depends(get_current_user),
    module_service: ModuleService = Depends(get_module_service),
) -> ModuleResponse:
    module = await module_service.get_module(course_id, module_id, user)
    return ModuleResponse.model_validate(module)


@router.patch("/{course_id}/modules/{module_id}", response_model=ModuleResponse)
@handle_service_errors
async def update_module(
    course_id: UUID,
    module_id: UUID,
    request: UpdateModuleRequest,
    user: UserModel = Depends(get_current_user),
    module_service: ModuleService = Depends(get_module_service),
) -> ModuleResponse:
    module = await module_service.update_module(
        course_id,
        module_id,
        user,
        request.model_dump(exclude_unset=True),
    )
    return ModuleResponse.model_validate(module)


@router.delete("/{course_id}/modules/{module_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_module(
    course_id: UUID,
    module_id: UUID,
    user: UserModel = Depends(get_current_user),
    module_service: ModuleService = Depends(get_module_service),
) -> MessageResponse:
    """
    Delete a module, its lessons and their files.

    Raises:
        HTTPException(404): Course or module not found
        HTTPException(403): Not the owner
    """
    await module_service.delete_module(course_id, module_id, user)
    return MessageResponse(message="Module deleted successfully")
