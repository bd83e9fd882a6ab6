"""
Test suite for ObjectStorageClient.

Uses a MagicMock boto3 client; no network access.

System role: Verification of object storage operations
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.configs.storage import StorageSettings
from budhhub.core.exceptions import StorageError, StorageNotConfiguredError


def _settings(**overrides) -> StorageSettings:
    values = {
        "account_id": "acct",
        "bucket_name": "uploads",
        "access_key_id": "key",
        "secret_access_key": "secret",
        "public_url": "",
    }
    values.update(overrides)
    return StorageSettings(**values)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "HeadObject")


@pytest.fixture
def s3_client():
    client = MagicMock()
    client.generate_presigned_url.return_value = "https://signed.example/obj"
    return client


@pytest.fixture
def storage(s3_client) -> ObjectStorageClient:
    return ObjectStorageClient(_settings(), s3_client=s3_client)


class TestObjectStorageClient:
    """Test suite for ObjectStorageClient."""

    def test_upload_file_should_put_object(self, storage, s3_client) -> None:
        key = storage.upload_file("lessons/l/videos/v.mp4", b"data", "video/mp4")

        assert key == "lessons/l/videos/v.mp4"
        s3_client.put_object.assert_called_once_with(
            Bucket="uploads",
            Key="lessons/l/videos/v.mp4",
            Body=b"data",
            ContentType="video/mp4",
        )

    def test_upload_file_should_wrap_client_errors(self, storage, s3_client) -> None:
        s3_client.put_object.side_effect = _client_error("AccessDenied")

        with pytest.raises(StorageError):
            storage.upload_file("k", b"data", "text/plain")

    def test_unconfigured_client_should_refuse_operations(self) -> None:
        storage = ObjectStorageClient(_settings(account_id="", access_key_id=""))

        assert storage.is_configured is False
        with pytest.raises(StorageNotConfiguredError):
            storage.upload_file("k", b"", "text/plain")

    def test_delete_quietly_should_swallow_storage_errors(self, storage, s3_client) -> None:
        s3_client.delete_object.side_effect = _client_error("InternalError")

        assert storage.delete_quietly("k", course_id="c") is False

    def test_delete_quietly_should_skip_empty_key(self, storage, s3_client) -> None:
        assert storage.delete_quietly(None) is False
        s3_client.delete_object.assert_not_called()

    def test_presigned_upload_url_should_bind_content_type(self, storage, s3_client) -> None:
        url, expires_at = storage.generate_presigned_upload_url("k", content_type="image/png")

        assert url == "https://signed.example/obj"
        assert expires_at.tzinfo is not None
        s3_client.generate_presigned_url.assert_called_once_with(
            ClientMethod="put_object",
            Params={"Bucket": "uploads", "Key": "k", "ContentType": "image/png"},
            ExpiresIn=600,
        )

    def test_access_url_should_prefer_public_base(self, s3_client) -> None:
        storage = ObjectStorageClient(
            _settings(public_url="https://cdn.example.com/"), s3_client=s3_client
        )

        assert storage.get_access_url("a/b.png") == "https://cdn.example.com/a/b.png"
        s3_client.generate_presigned_url.assert_not_called()

    def test_access_url_should_sign_without_public_base(self, storage, s3_client) -> None:
        assert storage.get_access_url("a/b.png") == "https://signed.example/obj"
        assert s3_client.generate_presigned_url.call_args.kwargs["ExpiresIn"] == 3600
