"""
Public catalog API endpoints.

Routes:
- GET /courses - List published courses with filters and pagination
- GET /courses/{course_id} - Course with modules and lessons
- POST /courses/{course_id}/enroll - Enroll the caller

Dependencies: budhhub.application.services, budhhub.models
System role: Course discovery and enrollment HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from budhhub.api.deps.auth import get_current_user, get_current_user_optional
from budhhub.api.deps.dependencies import get_catalog_service, get_enrollment_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.catalog_service import CatalogService
from budhhub.application.services.enrollment_service import EnrollmentService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.models.course import CatalogResponse, CourseDetailResponse
from budhhub.models.enrollment import EnrollmentResponse

from .catalog_responses import map_catalog_to_response, map_course_detail_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
@handle_service_errors
async def list_courses(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(12, description="Page size, clamped to 1-50"),
    category: str | None = None,
    difficulty: str | None = None,
    search: str | None = None,
    sort: str = Query("newest", description="newest, oldest or title"),
    user: UserModel | None = Depends(get_current_user_optional),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> CatalogResponse:
    """
    List published courses.

    Args:
        page: Page number (values below 1 become 1)
        limit: Page size (clamped to 1-50)
        category: Exact category filter
        difficulty: Exact difficulty filter
        search: Case-insensitive title/description search
        sort: Sort order
        user: Optional caller, used for is_enrolled
        catalog_service: Injected CatalogService

    Returns:
        CatalogResponse: Courses, pagination and filter facets
    """
    catalog = await catalog_service.list_published_courses(
        user=user,
        page=page,
        limit=limit,
        category=category,
        difficulty=difficulty,
        search=search,
        sort=sort,
    )
    return map_catalog_to_response(catalog)


@router.get("/{course_id}", response_model=CourseDetailResponse)
@handle_service_errors
async def get_course(
    course_id: UUID,
    user: UserModel | None = Depends(get_current_user_optional),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> CourseDetailResponse:
    """
    Get a course with its modules and lessons.

    Raises:
        HTTPException(404): Course not found
        HTTPException(403): Course not visible to the caller
    """
    detail = await catalog_service.get_course_detail(course_id, user)
    return map_course_detail_to_response(detail)


@router.post("/{course_id}/enroll", response_model=EnrollmentResponse, status_code=201)
@handle_service_errors
async def enroll(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentResponse:
    """
    Enroll the caller in a published course.

    Raises:
        HTTPException(401): Not signed in
        HTTPException(404): Course not found
        HTTPException(403): Course not published
        HTTPException(400): Already enrolled
    """
    enrollment = await enrollment_service.enroll(course_id, user)
    return EnrollmentResponse.model_validate(enrollment)
