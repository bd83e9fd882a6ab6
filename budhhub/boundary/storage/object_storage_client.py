"""
S3-compatible object storage client.

Wraps a boto3 S3 client pointed at Cloudflare R2. Handles direct uploads
proxied by the API, deletions, metadata lookups and presigned URLs for
browser uploads/downloads.

Dependencies: boto3, botocore
System role: API-level object storage operations
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from budhhub.configs.storage import StorageSettings
from budhhub.core.exceptions import StorageError, StorageNotConfiguredError

logger = logging.getLogger(__name__)


class ObjectStorageClient:
    """S3 client for the uploads bucket."""

    def __init__(self, settings: StorageSettings, s3_client: Any | None = None) -> None:
        """
        Initialize storage client.

        Args:
            settings: Storage settings (bucket, credentials, public URL)
            s3_client: Pre-built boto3 client, mainly for tests
        """
        self._settings = settings
        self._bucket = settings.bucket_name
        self._s3_client = s3_client
        if self._s3_client is None and settings.is_configured:
            self._s3_client = boto3.client(
                "s3",
                endpoint_url=settings.endpoint_url,
                aws_access_key_id=settings.access_key_id,
                aws_secret_access_key=settings.secret_access_key,
                region_name=settings.region,
                config=Config(signature_version="s3v4"),
            )

    @property
    def is_configured(self) -> bool:
        return self._s3_client is not None

    @property
    def upload_url_expiry(self) -> int:
        return self._settings.upload_url_expiry

    @property
    def has_public_url(self) -> bool:
        return bool(self._settings.public_url)

    def _client(self) -> Any:
        if self._s3_client is None:
            raise StorageNotConfiguredError()
        return self._s3_client

    def upload_file(self, key: str, body: bytes, content_type: str) -> str:
        """
        Upload bytes under ``key``.

        Args:
            key: Object key
            body: File content
            content_type: MIME type stored with the object

        Returns:
            str: The object key

        Raises:
            StorageNotConfiguredError: Storage credentials missing
            StorageError: Upload rejected by the store
        """
        client = self._client()
        try:
            client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Object upload failed", extra={"key": key, "error": str(e)})
            raise StorageError(f"Failed to upload file: {e}", key=key) from e

        logger.info("Object uploaded", extra={"key": key, "size": len(body)})
        return key

    def delete_file(self, key: str) -> None:
        """
        Delete an object.

        Raises:
            StorageNotConfiguredError: Storage credentials missing
            StorageError: Deletion rejected by the store
        """
        client = self._client()
        try:
            client.delete_object(Bucket=self._bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Failed to delete file: {e}", key=key) from e
        logger.info("Object deleted", extra={"key": key})

    def generate_presigned_upload_url(
        self,
        key: str,
        content_type: str | None = None,
        expires_in: int | None = None,
    ) -> tuple[str, datetime]:
        """
        Generate presigned PUT URL for direct browser upload.

        Args:
            key: Object key
            content_type: MIME type the client must send, if known
            expires_in: URL expiry in seconds (default: upload_url_expiry)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)
        """
        expires_in = expires_in or self._settings.upload_url_expiry
        params = {"Bucket": self._bucket, "Key": key}
        if content_type:
            params["ContentType"] = content_type
        url = self._client().generate_presigned_url(
            ClientMethod="put_object",
            Params=params,
            ExpiresIn=expires_in,
        )
        return url, datetime.now(timezone.utc) + timedelta(seconds=expires_in)

    def generate_presigned_download_url(
        self,
        key: str,
        expires_in: int | None = None,
    ) -> tuple[str, datetime]:
        """
        Generate presigned GET URL for downloading/viewing an object.

        Args:
            key: Object key
            expires_in: URL expiry in seconds (default: presigned_url_expiry)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)
        """
        expires_in = expires_in or self._settings.presigned_url_expiry
        url = self._client().generate_presigned_url(
            ClientMethod="get_object",
            Params={"Bucket": self._bucket, "Key": key},
            ExpiresIn=expires_in,
        )
        return url, datetime.now(timezone.utc) + timedelta(seconds=expires_in)

    def get_public_url(self, key: str) -> str:
        """
        Unsigned URL of an object.

        Uses the configured public base URL, otherwise the account endpoint
        (which only works for buckets with public access).
        """
        if self._settings.public_url:
            return f"{self._settings.public_url.rstrip('/')}/{key}"
        return (
            f"https://{self._settings.account_id}.r2.cloudflarestorage.com/"
            f"{self._bucket}/{key}"
        )

    def get_access_url(self, key: str) -> str:
        """Public URL when a public base is configured, presigned GET URL otherwise."""
        if self.has_public_url:
            return self.get_public_url(key)
        url, _ = self.generate_presigned_download_url(key)
        return url

    def delete_quietly(self, key: str | None, **context: Any) -> bool:
        """
        Best-effort delete used by cleanup paths.

        Failures are logged and swallowed so the caller can go on deleting
        the database rows.

        Returns:
            bool: True if the object was deleted
        """
        if not key:
            return False
        try:
            self.delete_file(key)
            return True
        except StorageError as e:
            logger.warning(
                "Storage cleanup failed, continuing",
                extra={"key": key, "error": e.message, **context},
            )
            return False
