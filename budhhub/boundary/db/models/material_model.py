"""
Course material ORM model.

A material with ``lesson_id`` NULL belongs to the whole course; otherwise
it is attached to a single lesson.

Dependencies: sqlalchemy, budhhub.boundary.db.base
System role: Study material persistence
"""

import enum
import uuid

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from budhhub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class MaterialType(str, enum.Enum):
    """Coarse material category shown to learners."""

    IMAGE = "image"
    DOCUMENT = "document"
    PDF = "pdf"
    OTHER = "other"

    @classmethod
    def from_mime_type(cls, mime_type: str | None) -> "MaterialType":
        """
        Classify a MIME type.

        image/* -> image, application/pdf -> pdf, anything mentioning
        "word" or "text" -> document, otherwise other.
        """
        if not mime_type:
            return cls.OTHER
        if mime_type.startswith("image/"):
            return cls.IMAGE
        if mime_type == "application/pdf":
            return cls.PDF
        if "word" in mime_type or "text" in mime_type:
            return cls.DOCUMENT
        return cls.OTHER


class MaterialModel(Base, UUIDMixin, TimestampMixin):
    """
    Uploaded study material.

    Attributes:
        course_id: Owning course
        lesson_id: Owning lesson, None for course-level materials
        file_name: Original file name shown to learners
        file_key: Object storage key
        file_type: MIME type
        file_size: Size in bytes
        material_type: MaterialType
    """

    __tablename__ = "course_materials"

    course_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    lesson_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("lessons.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    file_name: Mapped[str] = mapped_column(String(512), nullable=False)
    file_key: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    material_type: Mapped[MaterialType] = mapped_column(
        Enum(
            MaterialType,
            native_enum=False,
            length=32,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=MaterialType.OTHER,
    )
