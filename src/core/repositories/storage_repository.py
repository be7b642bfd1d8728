"""Abstract contract for image file storage."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from core.models.upload import UploadResult


class ImageStorageRepository(ABC):
    """Contract for storing, serving and releasing contact images.

    Implementations could be local disk, a network mount, object storage, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def ensure_directory(self) -> Path:
        """Create the managed image directory if absent and return it."""

    @abstractmethod
    def save(self, stream: BinaryIO, declared_type: str, filename: str) -> UploadResult:
        """Validate and persist an uploaded image.

        Args:
            stream: Readable binary stream with the file content
            declared_type: Media type declared by the client
            filename: Client-side filename

        Returns:
            A success result with the public path and generated name, or a
            failure result with a human-readable reason. Never raises for
            validation or I/O failures.
        """

    @abstractmethod
    def delete(self, stored_path: str) -> bool:
        """Delete a previously stored image by its public path.

        Returns:
            True if a file was removed, False otherwise. Never raises.
        """

    @abstractmethod
    def read(self, file_name: str) -> tuple[bytes, str]:
        """Read a stored image by its generated name.

        Returns:
            Tuple of (content_bytes, media_type)

        Raises:
            NotFoundError: If no such image exists
        """
