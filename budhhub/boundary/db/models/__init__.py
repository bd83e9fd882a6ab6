"""ORM models."""

from budhhub.boundary.db.models.user_model import UserModel
from budhhub.boundary.db.models.course_model import CourseDifficulty, CourseModel
from budhhub.boundary.db.models.module_model import ModuleModel
from budhhub.boundary.db.models.lesson_model import LessonModel
from budhhub.boundary.db.models.enrollment_model import EnrollmentModel, LessonProgressModel
from budhhub.boundary.db.models.material_model import MaterialModel, MaterialType

__all__ = [
    "UserModel",
    "CourseModel",
    "CourseDifficulty",
    "ModuleModel",
    "LessonModel",
    "EnrollmentModel",
    "LessonProgressModel",
    "MaterialModel",
    "MaterialType",
]
