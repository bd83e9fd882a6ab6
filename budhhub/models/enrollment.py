"""
Enrollment and learner view schemas.

Dependencies: pydantic
System role: Learner API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from budhhub.models.course import CourseResponse
from budhhub.models.lesson import LessonResponse
from budhhub.models.material import MaterialResponse
from budhhub.models.module import ModuleResponse


class EnrollmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    course_id: uuid.UUID
    learner_id: uuid.UUID
    enrolled_at: datetime
    progress: int


class MyCourseResponse(BaseModel):
    """One entry of the learner's course list."""

    enrollment: EnrollmentResponse
    course: CourseResponse


class LearningLessonResponse(LessonResponse):
    completed: bool = False
    materials: list[MaterialResponse] = []


class LearningModuleResponse(ModuleResponse):
    lessons: list[LearningLessonResponse] = []


class LearningViewResponse(BaseModel):
    """Everything a learner needs to study an enrolled course."""

    course: CourseResponse
    enrollment: EnrollmentResponse
    modules: list[LearningModuleResponse]
    course_materials: list[MaterialResponse]


class LessonCompletionResponse(BaseModel):
    success: bool = True
    progress: int
    completed: int
    total: int
