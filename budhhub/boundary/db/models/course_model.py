"""
Course ORM model.

A course is owned by one instructor and groups modules, which in turn group
lessons. ``total_lessons`` is a denormalized counter recomputed on every
lesson mutation.

Dependencies: sqlalchemy, budhhub.boundary.db.base
System role: Course persistence
"""

import enum
import uuid
from decimal import Decimal

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from budhhub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class CourseDifficulty(str, enum.Enum):
    """Course difficulty levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        instructor_id: Owning instructor (users.id)
        title: Course title (512 char limit)
        description: Optional long description
        category: Optional free-form category used by catalog filters
        difficulty: Optional CourseDifficulty
        thumbnail_url: Public URL of the uploaded thumbnail
        price: Listed price, 0 for free courses
        is_published: Visible in the public catalog when True
        total_lessons: Count of lessons across all modules
        created_at: Course creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "courses"

    instructor_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(128), nullable=True)
    difficulty: Mapped[CourseDifficulty | None] = mapped_column(
        Enum(
            CourseDifficulty,
            native_enum=False,
            length=32,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=True,
    )
    thumbnail_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0"),
    )
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    total_lessons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
