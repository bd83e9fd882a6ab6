"""
Lesson API endpoints.

Routes (under /instructor/courses):
- GET /{course_id}/modules/{module_id}/lessons - List lessons
- POST /{course_id}/modules/{module_id}/lessons - Create lesson
- GET /{course_id}/modules/{module_id}/lessons/{lesson_id} - Get lesson
- PATCH /{course_id}/modules/{module_id}/lessons/{lesson_id} - Update lesson
- DELETE /{course_id}/modules/{module_id}/lessons/{lesson_id} - Delete lesson
- DELETE /{course_id}/modules/{module_id}/lessons/{lesson_id}/video - Remove video
- GET /{course_id}/lessons/{lesson_id}/video-url - Playback URL

Dependencies: budhhub.application.services, budhhub.models
System role: Lesson management HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from budhhub.api.deps.auth import get_current_user
from budhhub.api.deps.dependencies import get_lesson_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.lesson_service import LessonService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.models.common import MessageResponse
from budhhub.models.lesson import (
    CreateLessonRequest,
    LessonResponse,
    UpdateLessonRequest,
    VideoUrlResponse,
)

from .instructor_responses import map_lessons_to_response

router = APIRouter(prefix="/instructor/courses", tags=["instructor-lessons"])

LESSON_PATH = "/{course_id}/modules/{module_id}/lessons/{lesson_id}"


@router.get("/{course_id}/modules/{module_id}/lessons", response_model=list[LessonResponse])
@handle_service_errors
async def list_lessons(
    course_id: UUID,
    module_id: UUID,
    user: UserModel = Depends(get_current_user),
    lesson_service: LessonService = Depends(get_lesson_service),
) -> list[LessonResponse]:
    lessons = await lesson_service.list_lessons(course_id, module_id, user)
    return map_lessons_to_response(lessons)


@router.post(
    "/{course_id}/modules/{module_id}/lessons",
    response_model=LessonResponse,
    status_code=201,
)
@handle_service_errors
async def create_lesson(
    course_id: UUID,
    module_id: UUID,
    request: CreateLessonRequest,
    user: UserModel = Depends(get_current_user),
    lesson_service: LessonService = Depends(get_lesson_service),
) -> LessonResponse:
    """
    Create a lesson; the course's lesson count is recomputed.

    Raises:
        HTTPException(404): Course or module not found
        HTTPException(403): Not the owner
    """
    lesson = await lesson_service.create_lesson(
        course_id,
        module_id,
        user,
        request.model_dump(),
    )
    return LessonResponse.model_validate(lesson)


@router.get(LESSON_PATH, response_model=LessonResponse)
@handle_service_errors
async def get_lesson(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    user: UserModel = Depends(get_current_user),
    lesson_service: LessonService = Depends(get_lesson_service),
) -> LessonResponse:
    lesson = await lesson_service.get_lesson(course_id, module_id, lesson_id, user)
    return LessonResponse.model_validate(lesson)


@router.patch(LESSON_PATH, response_model=LessonResponse)
@handle_service_errors
async def update_lesson(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    request: UpdateLessonRequest,
    user: UserModel = Depends(get_current_user),
    lesson_service: LessonService = Depends(get_lesson_service),
) -> LessonResponse:
    lesson = await lesson_service.update_lesson(
        course_id,
        module_id,
        lesson_id,
        user,
        request.model_dump(exclude_unset=True),
    )
    return LessonResponse.model_validate(lesson)


@router.delete(LESSON_PATH, response_model=MessageResponse)
@handle_service_errors
async def delete_lesson(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    user: UserModel = Depends(get_current_user),
    lesson_service: LessonService = Depends(get_lesson_service),
) -> MessageResponse:
    """
    Delete a lesson with its video, materials and progress rows.

    Raises:
        HTTPException(404): Course, module or lesson not found
        HTTPException(403): Not the owner
    """
    await lesson_service.delete_lesson(course_id, module_id, lesson_id, user)
    return MessageResponse(message="Lesson deleted successfully")


@router.delete(LESSON_PATH + "/video", response_model=LessonResponse)
@handle_service_errors
async def delete_lesson_video(
    course_id: UUID,
    module_id: UUID,
    lesson_id: UUID,
    user: UserModel = Depends(get_current_user),
    lesson_service: LessonService = Depends(get_lesson_service),
) -> LessonResponse:
    """
    Remove a lesson's video.

    Raises:
        HTTPException(400): Lesson has no video
    """
    lesson = await lesson_service.delete_lesson_video(course_id, module_id, lesson_id, user)
    return LessonResponse.model_validate(lesson)


@router.get("/{course_id}/lessons/{lesson_id}/video-url", response_model=VideoUrlResponse)
@handle_service_errors
async def get_video_url(
    course_id: UUID,
    lesson_id: UUID,
    user: UserModel = Depends(get_current_user),
    lesson_service: LessonService = Depends(get_lesson_service),
) -> VideoUrlResponse:
    """
    Playback URL of a lesson video.

    Raises:
        HTTPException(404): Lesson or video not found
        HTTPException(403): Not the owner, or lesson outside the course
    """
    url = await lesson_service.get_video_url(course_id, lesson_id, user)
    return VideoUrlResponse(url=url)
