"""
Instructor course API endpoints.

Routes:
- GET /instructor/courses - List the caller's courses
- POST /instructor/courses - Create course
- GET /instructor/courses/{course_id} - Get owned course
- PATCH /instructor/courses/{course_id} - Update course
- DELETE /instructor/courses/{course_id} - Delete course and its content
- POST /instructor/courses/{course_id}/publish - Publish or unpublish

Dependencies: budhhub.application.services, budhhub.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from budhhub.api.deps.auth import get_current_user, require_instructor
from budhhub.api.deps.dependencies import get_course_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.course_service import CourseService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.models.common import MessageResponse
from budhhub.models.course import (
    CourseResponse,
    CreateCourseRequest,
    PublishCourseRequest,
    PublishCourseResponse,
    UpdateCourseRequest,
)

from .instructor_responses import (
    map_course_to_response,
    map_courses_to_response,
    map_publish_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/instructor/courses", tags=["instructor-courses"])


@router.get("", response_model=list[CourseResponse])
@handle_service_errors
async def list_courses(
    user: UserModel = Depends(require_instructor),
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """List the caller's courses, newest first."""
    courses = await course_service.list_instructor_courses(user)
    return map_courses_to_response(courses)


@router.post("", response_model=CourseResponse, status_code=201)
@handle_service_errors
async def create_course(
    request: CreateCourseRequest,
    user: UserModel = Depends(require_instructor),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create an unpublished course.

    Args:
        request: CreateCourseRequest with title and optional details
        user: Injected instructor
        course_service: Injected CourseService

    Returns:
        CourseResponse: Created course

    Raises:
        HTTPException(400): Invalid request
        HTTPException(403): Caller is not an instructor
    """
    logger.info(
        "Creating new course",
        extra={"course_title": request.title, "has_description": bool(request.description)},
    )
    course = await course_service.create_course(
        user=user,
        title=request.title,
        description=request.description,
        category=request.category,
        difficulty=request.difficulty,
        thumbnail_url=request.thumbnail_url,
        price=request.price,
    )
    return map_course_to_response(course)


@router.get("/{course_id}", response_model=CourseResponse)
@handle_service_errors
async def get_course(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get an owned course.

    Raises:
        HTTPException(404): Course not found
        HTTPException(403): Not the owner
    """
    course = await course_service.get_course(course_id, user)
    return map_course_to_response(course)


@router.patch("/{course_id}", response_model=CourseResponse)
@handle_service_errors
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    user: UserModel = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Partially update an owned course.

    Only fields present in the body are applied.

    Raises:
        HTTPException(400): Empty update
        HTTPException(404): Course not found
        HTTPException(403): Not the owner
    """
    course = await course_service.update_course(
        course_id,
        user,
        request.model_dump(exclude_unset=True),
    )
    return map_course_to_response(course)


@router.delete("/{course_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_course(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> MessageResponse:
    """
    Delete an owned course with its content and stored files.

    Raises:
        HTTPException(404): Course not found
        HTTPException(403): Not the owner
    """
    await course_service.delete_course(course_id, user)
    return MessageResponse(message="Course deleted successfully")


@router.post("/{course_id}/publish", response_model=PublishCourseResponse)
@handle_service_errors
async def publish_course(
    course_id: UUID,
    request: PublishCourseRequest,
    user: UserModel = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> PublishCourseResponse:
    """
    Publish or unpublish an owned course.

    Raises:
        HTTPException(400): is_published missing or not a boolean
        HTTPException(404): Course not found
        HTTPException(403): Not the owner
    """
    course = await course_service.set_published(course_id, user, request.is_published)
    return map_publish_to_response(course)
