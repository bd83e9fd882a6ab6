"""
Lesson ORM model.

Dependencies: sqlalchemy, budhhub.boundary.db.base
System role: Lesson persistence
"""

import uuid

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from budhhub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class LessonModel(Base, UUIDMixin, TimestampMixin):
    """
    Lesson ORM model.

    The video itself lives in object storage; the row keeps its key and
    metadata so the file can be signed or removed later.

    Attributes:
        module_id: Parent module
        title: Lesson title (512 char limit)
        content: Optional lesson body text
        video_key: Object storage key of the lesson video
        video_size: Video size in bytes
        video_duration: Video duration in seconds
        video_mime_type: Video MIME type
        ord: Display order within the module
    """

    __tablename__ = "lessons"

    module_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("modules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    video_key: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    video_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    video_duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    video_mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    ord: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
