"""
Lesson removal shared by lesson, module and course deletion.

Storage objects go first and best-effort; rows are then removed children
first so foreign keys hold on every backend. Nothing here commits.

Dependencies: sqlalchemy, budhhub.boundary
System role: Cascading content deletion
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.enrollment_crud import lesson_progress_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.CRUD.material_crud import material_crud
from budhhub.boundary.db.models.lesson_model import LessonModel
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient

logger = logging.getLogger(__name__)


async def delete_lessons(
    db: AsyncSession,
    storage: ObjectStorageClient,
    lessons: Sequence[LessonModel],
) -> int:
    """
    Delete lessons with their videos, materials and progress rows.

    Args:
        db: Async database session
        storage: Object storage client for file cleanup
        lessons: Lessons to remove

    Returns:
        int: Number of lessons deleted
    """
    if not lessons:
        return 0

    lesson_ids = [lesson.id for lesson in lessons]
    materials = await material_crud.list_for_lessons(db, lesson_ids)

    for lesson in lessons:
        storage.delete_quietly(lesson.video_key, lesson_id=str(lesson.id))
    for material in materials:
        storage.delete_quietly(material.file_key, material_id=str(material.id))

    await material_crud.delete_by_lessons(db, lesson_ids)
    await lesson_progress_crud.delete_by_lessons(db, lesson_ids)
    deleted = await lesson_crud.delete_by_ids(db, lesson_ids)

    logger.info(
        "Lessons deleted",
        extra={"lesson_count": deleted, "material_count": len(materials)},
    )
    return deleted
