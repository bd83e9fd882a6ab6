"""
Object storage key helpers.

Keys follow ``{prefix}/{epoch_ms}-{random}-{sanitized filename}`` so
uploads never collide and stay grouped by owning course or lesson.

Dependencies: None
System role: Storage key generation for uploads
"""

import re
import secrets
import string
import time
from uuid import UUID

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")
_BASE36 = string.digits + string.ascii_lowercase


def sanitize_filename(filename: str) -> str:
    """Replace every character outside ``[A-Za-z0-9.-]`` with an underscore."""
    return _UNSAFE_CHARS.sub("_", filename)


def _random_suffix(length: int = 11) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def generate_file_key(prefix: str, filename: str) -> str:
    """
    Generate a unique object key under ``prefix``.

    Args:
        prefix: Key prefix without trailing slash
        filename: Original file name from the client

    Returns:
        str: ``{prefix}/{timestamp}-{random}-{sanitized}``
    """
    timestamp = int(time.time() * 1000)
    return f"{prefix}/{timestamp}-{_random_suffix()}-{sanitize_filename(filename)}"


def thumbnail_key(course_id: UUID | None, filename: str) -> str:
    """Thumbnail key; uploads made before the course exists go under temp/."""
    if course_id is None:
        return generate_file_key("temp/thumbnails", filename)
    return generate_file_key(f"courses/{course_id}/thumbnails", filename)


def video_key(lesson_id: UUID, filename: str) -> str:
    return generate_file_key(f"lessons/{lesson_id}/videos", filename)


def material_key(
    course_id: UUID,
    filename: str,
    lesson_id: UUID | None = None,
    material_id: UUID | None = None,
) -> str:
    """
    Material key, scoped to the lesson when one is given.

    Args:
        course_id: Owning course
        filename: Original file name
        lesson_id: Owning lesson for lesson-level materials
        material_id: Existing material row the file replaces

    Returns:
        str: Object key
    """
    name = f"{material_id}-{filename}" if material_id else filename
    if lesson_id is not None:
        return generate_file_key(f"lessons/{lesson_id}/materials", name)
    return generate_file_key(f"courses/{course_id}/materials", name)


def thumbnail_key_from_url(course_id: UUID, thumbnail_url: str) -> str | None:
    """
    Recover the storage key of a course thumbnail from its public URL.

    Args:
        course_id: Course the thumbnail belongs to
        thumbnail_url: Stored public URL

    Returns:
        str | None: ``courses/{course_id}/thumbnails/<last segment>``, or None
        when the URL has no file segment
    """
    filename = thumbnail_url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    if not filename:
        return None
    return f"courses/{course_id}/thumbnails/{filename}"
