"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def upload_file(self, bucket_name: str, object_name: str, file_path: str) -> None:
        """
        Uploads a local file to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination path/name in storage.
            file_path: Path of the local file to upload.

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def object_exists(self, bucket_name: str, object_name: str) -> bool:
        """
        Checks whether an object exists.

        Raises:
            StorageLookupError: If the check fails for a reason other than absence.
        """

    @abstractmethod
    def delete_object(self, bucket_name: str, object_name: str) -> None:
        """
        Deletes an object from storage.

        Raises:
            StorageDeleteError: If the deletion fails.
        """
