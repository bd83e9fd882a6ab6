"""
Module ORM model.

Dependencies: sqlalchemy, budhhub.boundary.db.base
System role: Course module persistence
"""

import uuid

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from budhhub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ModuleModel(Base, UUIDMixin, TimestampMixin):
    """
    Ordered section of a course.

    Attributes:
        course_id: Parent course
        title: Module title (512 char limit)
        ord: Display order within the course
    """

    __tablename__ = "modules"

    course_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    ord: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
