"""Object storage boundary."""

from budhhub.boundary.storage.object_storage_client import ObjectStorageClient

__all__ = ["ObjectStorageClient"]
