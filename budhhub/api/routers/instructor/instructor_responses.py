"""
Instructor response mapping utilities.

Transforms ORM rows returned by services into Pydantic response models.

Dependencies: budhhub.models
System role: Instructor response transformation
"""

from typing import Sequence

from budhhub.boundary.db.models.course_model import CourseModel
from budhhub.boundary.db.models.lesson_model import LessonModel
from budhhub.boundary.db.models.material_model import MaterialModel
from budhhub.boundary.db.models.module_model import ModuleModel
from budhhub.models.course import CourseResponse, PublishCourseResponse
from budhhub.models.lesson import LessonResponse
from budhhub.models.material import MaterialResponse
from budhhub.models.module import ModuleResponse


def map_course_to_response(course: CourseModel) -> CourseResponse:
    return CourseResponse.model_validate(course)


def map_courses_to_response(courses: Sequence[CourseModel]) -> list[CourseResponse]:
    return [map_course_to_response(course) for course in courses]


def map_publish_to_response(course: CourseModel) -> PublishCourseResponse:
    """
    Wrap a course after a publish toggle with the matching message.

    Args:
        course: Course with its new publish state

    Returns:
        PublishCourseResponse: message plus course
    """
    state = "published" if course.is_published else "unpublished"
    return PublishCourseResponse(
        message=f"Course {state} successfully",
        course=map_course_to_response(course),
    )


def map_modules_to_response(modules: Sequence[ModuleModel]) -> list[ModuleResponse]:
    return [ModuleResponse.model_validate(module) for module in modules]


def map_lessons_to_response(lessons: Sequence[LessonModel]) -> list[LessonResponse]:
    return [LessonResponse.model_validate(lesson) for lesson in lessons]


def map_materials_to_response(materials: Sequence[MaterialModel]) -> list[MaterialResponse]:
    return [MaterialResponse.model_validate(material) for material in materials]
