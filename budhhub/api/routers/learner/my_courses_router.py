"""
Learner course API endpoints.

Routes:
- GET /my-courses - Enrolled courses
- GET /my-courses/{course_id} - Learning view of an enrolled course
- POST /my-courses/{course_id}/lessons/{lesson_id}/complete - Mark lesson complete
- GET /my-courses/{course_id}/lessons/{lesson_id}/video-url - Video playback URL
- GET /my-courses/{course_id}/materials/{material_id}/url - Course material URL
- GET /my-courses/{course_id}/lessons/{lesson_id}/materials/{material_id}/url - Lesson material URL

Dependencies: budhhub.application.services, budhhub.models
System role: Learner progress HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import get_enrollment_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.enrollment_service import EnrollmentService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.models.enrollment import (
    LearningViewResponse,
    LessonCompletionResponse,
    MyCourseResponse,
)
from budhhub.models.lesson import VideoUrlResponse
from budhhub.models.material import MaterialUrlResponse

from .learner_responses import map_learning_view_to_response, map_my_courses_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/my-courses", tags=["learner"])


@router.get("", response_model=list[MyCourseResponse])
@handle_service_errors
async def list_my_courses(
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> list[MyCourseResponse]:
    """List the caller's enrollments with their courses, newest first."""
    entries = await enrollment_service.list_my_courses(user)
    return map_my_courses_to_response(entries)


@router.get("/{course_id}", response_model=LearningViewResponse)
@handle_service_errors
async def get_learning_view(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> LearningViewResponse:
    """
    Course content with per-lesson completion for an enrolled learner.

    Raises:
        HTTPException(403): Not enrolled
    """
    view = await enrollment_service.get_learning_view(course_id, user)
    return map_learning_view_to_response(view)


@router.post(
    "/{course_id}/lessons/{lesson_id}/complete",
    response_model=LessonCompletionResponse,
)
@handle_service_errors
async def complete_lesson(
    course_id: UUID,
    lesson_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> LessonCompletionResponse:
    """
    Mark a lesson complete and return the updated progress.

    Raises:
        HTTPException(403): Not enrolled, or lesson outside the course
        HTTPException(404): Lesson not found
    """
    result = await enrollment_service.complete_lesson(course_id, lesson_id, user)
    return LessonCompletionResponse(**result)


@router.get("/{course_id}/lessons/{lesson_id}/video-url", response_model=VideoUrlResponse)
@handle_service_errors
async def get_lesson_video_url(
    course_id: UUID,
    lesson_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> VideoUrlResponse:
    url = await enrollment_service.get_lesson_video_url(course_id, lesson_id, user)
    return VideoUrlResponse(url=url)


@router.get("/{course_id}/materials/{material_id}/url", response_model=MaterialUrlResponse)
@handle_service_errors
async def get_course_material_url(
    course_id: UUID,
    material_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> MaterialUrlResponse:
    result = await enrollment_service.get_course_material_url(course_id, material_id, user)
    return MaterialUrlResponse(**result)


@router.get(
    "/{course_id}/lessons/{lesson_id}/materials/{material_id}/url",
    response_model=MaterialUrlResponse,
)
@handle_service_errors
async def get_lesson_material_url(
    course_id: UUID,
    lesson_id: UUID,
    material_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> MaterialUrlResponse:
    result = await enrollment_service.get_lesson_material_url(
        course_id,
        lesson_id,
        material_id,
        user,
    )
    return MaterialUrlResponse(**result)
