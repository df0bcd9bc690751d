import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.exceptions import ExternalServiceError

DEFAULT_UPLOAD_FOLDER = "event-images"


@dataclass
class PresignedUpload:
    """A signed PUT URL together with the object key it writes to."""

    url: str
    key: str
    bucket: str
    expires_in: int


class StorageBackend(Protocol):
    def generate_upload_url(
        self, key: str, content_type: str, expires_in: int | None = None
    ) -> PresignedUpload:
        """Return a presigned URL the client can PUT the file to."""
        ...

    def public_url(self, key: str | None) -> str:
        """Return the public URL of a stored object."""
        ...


class S3Storage:
    """S3-compatible storage (LocalStack in development)."""

    def __init__(self) -> None:
        self._client = boto3.client(
            "s3",
            endpoint_url=settings.S3_ENDPOINT_URL or None,
            aws_access_key_id=settings.S3_ACCESS_KEY_ID,
            aws_secret_access_key=settings.S3_SECRET_ACCESS_KEY,
            config=BotoConfig(
                signature_version="s3v4",
                s3={"addressing_style": "path"},
                retries={"max_attempts": 3, "mode": "standard"},
            ),
            region_name=settings.S3_REGION,
        )
        self._bucket = settings.S3_BUCKET_NAME

    def generate_upload_url(
        self, key: str, content_type: str, expires_in: int | None = None
    ) -> PresignedUpload:
        ttl = expires_in or settings.UPLOAD_URL_EXPIRE_SECONDS
        try:
            url: str = self._client.generate_presigned_url(
                "put_object",
                Params={"Bucket": self._bucket, "Key": key, "ContentType": content_type},
                ExpiresIn=ttl,
            )
        except (BotoCoreError, ClientError) as e:
            raise ExternalServiceError(
                f"Failed to generate upload URL: {e}", service="s3"
            ) from e
        return PresignedUpload(url=url, key=key, bucket=self._bucket, expires_in=ttl)

    def public_url(self, key: str | None) -> str:
        if not key:
            return settings.DEFAULT_EVENT_IMAGE
        clean_key = key.lstrip("/")
        if settings.S3_PUBLIC_URL:
            return f"{settings.S3_PUBLIC_URL}/{clean_key}"
        return f"{settings.S3_ENDPOINT_URL}/{self._bucket}/{clean_key}"


def get_storage() -> StorageBackend:
    return S3Storage()


def build_object_key(original_filename: str, folder: str | None = None) -> str:
    """Build ``<folder>/<uuid><ext>`` for an upload; only the extension of the name is kept."""
    extension = Path(original_filename).suffix.lower() or ".jpg"
    return f"{folder or DEFAULT_UPLOAD_FOLDER}/{uuid.uuid4()}{extension}"
