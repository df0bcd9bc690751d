"""Presigned upload URLs for event images and avatars."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.auth.dependencies import get_current_user
from app.auth.models.user import User
from app.core.constants import UPLOAD_ALLOWED_FOLDERS, UPLOAD_ALLOWED_MIME_TYPES
from app.core.storage import StorageBackend, build_object_key, get_storage
from app.uploads.schemas.upload import UploadUrlRequest, UploadUrlResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-url", response_model=UploadUrlResponse)
async def generate_upload_url(
    data: UploadUrlRequest,
    current_user: User = Depends(get_current_user),
    storage: StorageBackend = Depends(get_storage),
) -> UploadUrlResponse:
    """Sign a PUT URL the browser can upload the file to directly."""
    if data.content_type not in UPLOAD_ALLOWED_MIME_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type {data.content_type}. "
            f"Allowed: {', '.join(UPLOAD_ALLOWED_MIME_TYPES)}",
        )
    if data.folder is not None and data.folder not in UPLOAD_ALLOWED_FOLDERS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown upload folder {data.folder}",
        )

    key = build_object_key(data.filename, data.folder)
    upload = storage.generate_upload_url(key, data.content_type)
    logger.info(f"Upload URL issued to user {current_user.id} for {key}")

    return UploadUrlResponse(
        url=upload.url,
        key=upload.key,
        bucket=upload.bucket,
        expires_in=upload.expires_in,
        public_url=storage.public_url(upload.key),
    )
