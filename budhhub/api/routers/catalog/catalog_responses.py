"""
Catalog response mapping utilities.

Transforms service dictionaries and ORM rows into Pydantic response models.

Dependencies: budhhub.models.course
System role: Catalog response transformation
"""

from typing import Any

from budhhub.models.course import (
    CatalogCourseResponse,
    CatalogResponse,
    CourseDetailResponse,
    CourseResponse,
)
from budhhub.models.lesson import LessonResponse
from budhhub.models.module import ModuleResponse


def map_catalog_to_response(catalog: dict[str, Any]) -> CatalogResponse:
    """
    Transform a catalog page into CatalogResponse.

    Args:
        catalog: {"items": [{"course", "is_enrolled"}], "pagination", "filters"}

    Returns:
        CatalogResponse: Pydantic model for API response
    """
    courses = [
        CatalogCourseResponse(
            **CourseResponse.model_validate(item["course"]).model_dump(),
            is_enrolled=item["is_enrolled"],
        )
        for item in catalog["items"]
    ]
    return CatalogResponse(
        courses=courses,
        pagination=catalog["pagination"],
        filters=catalog["filters"],
    )


def map_course_detail_to_response(detail: dict[str, Any]) -> CourseDetailResponse:
    return CourseDetailResponse(
        course=CourseResponse.model_validate(detail["course"]),
        modules=[ModuleResponse.model_validate(m) for m in detail["modules"]],
        lessons=[LessonResponse.model_validate(lesson) for lesson in detail["lessons"]],
    )
