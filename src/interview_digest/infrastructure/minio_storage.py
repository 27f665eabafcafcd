"""MinIO implementation of the StorageClient interface."""

import logging

from minio import Minio
from minio.error import S3Error

from interview_digest.domain.models import FALLBACK_MIME_TYPE, guess_mime_type
from interview_digest.exceptions import (
    StorageDeleteError,
    StorageLookupError,
    StorageUploadError,
)

from .interfaces import StorageClient

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"NoSuchKey", "NoSuchObject", "ResourceNotFound"}


class MinioStorageClient(StorageClient):
    """Handles object storage operations through an S3-compatible MinIO client."""

    def __init__(self, client: Minio):
        self._client = client

    def upload_file(self, bucket_name: str, object_name: str, file_path: str) -> None:
        try:
            self._client.fput_object(
                bucket_name=bucket_name,
                object_name=object_name,
                file_path=file_path,
                content_type=guess_mime_type(file_path) or FALLBACK_MIME_TYPE,
            )
            logger.info(
                "File uploaded to storage",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "file_path": file_path,
                },
            )
        except Exception as e:
            logger.exception(
                "Storage upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

    def object_exists(self, bucket_name: str, object_name: str) -> bool:
        try:
            self._client.stat_object(bucket_name=bucket_name, object_name=object_name)
            return True
        except S3Error as e:
            if e.code in NOT_FOUND_CODES:
                return False
            logger.exception(
                "Storage lookup failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageLookupError(object_name, e) from e
        except Exception as e:
            logger.exception(
                "Storage lookup failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageLookupError(object_name, e) from e

    def delete_object(self, bucket_name: str, object_name: str) -> None:
        try:
            self._client.remove_object(bucket_name=bucket_name, object_name=object_name)
            logger.info(
                "Object deleted from storage",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
        except Exception as e:
            logger.exception(
                "Storage delete failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDeleteError(object_name, e) from e
