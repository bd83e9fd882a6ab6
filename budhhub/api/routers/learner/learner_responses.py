"""
Learner response mapping utilities.

Transforms the nested dictionaries built by the enrollment service into
Pydantic response models.

Dependencies: budhhub.models.enrollment
System role: Learner response transformation
"""

from typing import Any

from budhhub.models.course import CourseResponse
from budhhub.models.enrollment import (
    EnrollmentResponse,
    LearningLessonResponse,
    LearningModuleResponse,
    LearningViewResponse,
    MyCourseResponse,
)
from budhhub.models.lesson import LessonResponse
from budhhub.models.material import MaterialResponse
from budhhub.models.module import ModuleResponse


def map_my_courses_to_response(entries: list[dict[str, Any]]) -> list[MyCourseResponse]:
    return [
        MyCourseResponse(
            enrollment=EnrollmentResponse.model_validate(entry["enrollment"]),
            course=CourseResponse.model_validate(entry["course"]),
        )
        for entry in entries
    ]


def _map_lesson(entry: dict[str, Any]) -> LearningLessonResponse:
    return LearningLessonResponse(
        **LessonResponse.model_validate(entry["lesson"]).model_dump(),
        completed=entry["completed"],
        materials=[MaterialResponse.model_validate(m) for m in entry["materials"]],
    )


def _map_module(entry: dict[str, Any]) -> LearningModuleResponse:
    return LearningModuleResponse(
        **ModuleResponse.model_validate(entry["module"]).model_dump(),
        lessons=[_map_lesson(lesson) for lesson in entry["lessons"]],
    )


def map_learning_view_to_response(view: dict[str, Any]) -> LearningViewResponse:
    """
    Transform the learning view into LearningViewResponse.

    Args:
        view: {"course", "enrollment", "modules", "course_materials"}

    Returns:
        LearningViewResponse: Pydantic model for API response
    """
    return LearningViewResponse(
        course=CourseResponse.model_validate(view["course"]),
        enrollment=EnrollmentResponse.model_validate(view["enrollment"]),
        modules=[_map_module(module) for module in view["modules"]],
        course_materials=[
            MaterialResponse.model_validate(m) for m in view["course_materials"]
        ],
    )
