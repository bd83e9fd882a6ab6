"""
Enrollment and lesson progress ORM models.

Dependencies: sqlalchemy, budhhub.boundary.db.base
System role: Learner enrollment and progress persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from budhhub.boundary.db.base import Base, UUIDMixin, utcnow


class EnrollmentModel(Base, UUIDMixin):
    """
    A learner's enrollment in a course.

    Attributes:
        course_id: Enrolled course
        learner_id: Enrolled user
        enrolled_at: Enrollment timestamp (UTC)
        progress: Completion percentage, 0-100
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("course_id", "learner_id"),
        CheckConstraint("progress >= 0 AND progress <= 100", name="progress_range"),
    )

    course_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    learner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    enrolled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class LessonProgressModel(Base, UUIDMixin):
    """
    Per-lesson completion flag for an enrollment.

    Attributes:
        enrollment_id: Owning enrollment
        lesson_id: Tracked lesson
        completed: True once the learner marked the lesson complete
        completed_at: When the lesson was marked complete
    """

    __tablename__ = "lesson_progress"
    __table_args__ = (UniqueConstraint("enrollment_id", "lesson_id"),)

    enrollment_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("enrollments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    lesson_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("lessons.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
