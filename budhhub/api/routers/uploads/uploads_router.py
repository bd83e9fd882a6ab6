"""
Upload API endpoints.

Routes:
- POST /upload/thumbnail - Upload course thumbnail (multipart)
- POST /upload/video - Upload lesson video (multipart)
- POST /upload/material - Upload study material (multipart)
- GET /upload/signed-url - Presigned PUT URL for direct upload

Dependencies: fastapi, budhhub.application.services
System role: File upload HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from budhhub.api.deps.auth import require_instructor
from budhhub.api.deps.dependencies import get_settings_dependency, get_upload_service
from budhhub.api.routers.router_utils import handle_service_errors
from budhhub.application.services.upload_service import UploadService
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.configs import Settings
from budhhub.core.exceptions import InvalidRequestError
from budhhub.models.upload import SignedUploadUrlResponse, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["uploads"])


def _check_declared_size(file: UploadFile, limit_bytes: int) -> None:
    """Reject an oversized upload from its declared size, before buffering it."""
    if file.size is not None and file.size > limit_bytes:
        raise InvalidRequestError(
            f"File too large. Maximum size is {limit_bytes // (1024 * 1024)}MB."
        )


@router.post("/thumbnail", response_model=UploadResponse)
@handle_service_errors
async def upload_thumbnail(
    file: UploadFile = File(...),
    course_id: UUID | None = Form(None),
    user: UserModel = Depends(require_instructor),
    upload_service: UploadService = Depends(get_upload_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadResponse:
    """
    Upload a course thumbnail image.

    Args:
        file: Image file
        course_id: Owning course; omitted for courses not created yet
        user: Injected instructor
        upload_service: Injected UploadService

    Returns:
        UploadResponse: Stored key and public URL

    Raises:
        HTTPException(400): Not an image, or too large
        HTTPException(403/404): Course checks failed
    """
    _check_declared_size(file, settings.upload.max_material_size_bytes)
    body = await file.read()
    result = await upload_service.upload_thumbnail(
        user,
        filename=file.filename or "thumbnail",
        content_type=file.content_type,
        body=body,
        course_id=course_id,
    )
    return UploadResponse(**result)


@router.post("/video", response_model=UploadResponse)
@handle_service_errors
async def upload_video(
    file: UploadFile = File(...),
    lesson_id: UUID = Form(...),
    user: UserModel = Depends(require_instructor),
    upload_service: UploadService = Depends(get_upload_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadResponse:
    """
    Upload a lesson video.

    Raises:
        HTTPException(400): Not a video, or too large
        HTTPException(403/404): Lesson checks failed
    """
    _check_declared_size(file, settings.upload.max_video_size_bytes)
    body = await file.read()
    result = await upload_service.upload_video(
        user,
        filename=file.filename or "video",
        content_type=file.content_type,
        body=body,
        lesson_id=lesson_id,
    )
    return UploadResponse(**result)


@router.post("/material", response_model=UploadResponse)
@handle_service_errors
async def upload_material(
    file: UploadFile = File(...),
    course_id: UUID = Form(...),
    lesson_id: UUID | None = Form(None),
    material_id: UUID | None = Form(None),
    user: UserModel = Depends(require_instructor),
    upload_service: UploadService = Depends(get_upload_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadResponse:
    """
    Upload a study material file.

    Raises:
        HTTPException(400): MIME type not allowed, or too large
        HTTPException(403/404): Course or lesson checks failed
    """
    _check_declared_size(file, settings.upload.max_material_size_bytes)
    body = await file.read()
    result = await upload_service.upload_material(
        user,
        filename=file.filename or "material",
        content_type=file.content_type,
        body=body,
        course_id=course_id,
        lesson_id=lesson_id,
        material_id=material_id,
    )
    return UploadResponse(**result)


@router.get("/signed-url", response_model=SignedUploadUrlResponse)
@handle_service_errors
async def get_signed_upload_url(
    file: str = Query(..., min_length=1, description="Object key to upload to"),
    content_type: str | None = Query(None, description="MIME type the client will send"),
    user: UserModel = Depends(require_instructor),
    upload_service: UploadService = Depends(get_upload_service),
) -> SignedUploadUrlResponse:
    """
    Presigned PUT URL for uploading straight to object storage.

    Returns:
        SignedUploadUrlResponse: url, key, expires_in, expires_at
    """
    result = await upload_service.create_signed_upload_url(user, file, content_type)
    return SignedUploadUrlResponse(**result)
