"""Local-disk implementation of ImageStorageRepository."""

from pathlib import Path
from typing import BinaryIO
import uuid

from aws_lambda_powertools import Logger

from core.infrastructure.adapters.filesystem_adapter import (
    FilesystemAdapter,
    FilesystemAdapterProtocol,
)
from core.models.errors import NotFoundError
from core.models.upload import UploadResult
from core.repositories.storage_repository import ImageStorageRepository
from core.utils.constants import (
    EXTENSION_MIME_TYPE_MAP,
    UPLOAD_IMAGES_DIRNAME,
    UPLOAD_PUBLIC_PREFIX,
)
from core.utils.file_validator import file_extension, validate_image_file
from core.utils.time import epoch_millis

logger = Logger(UTC=True)


class LocalDiskImageStorage(ImageStorageRepository):
    """Image storage backed by a managed directory on local disk.

    Files live in ``<upload root>/images`` and are addressed publicly as
    ``/uploads/images/<name>``. Names are never rewritten after save.
    """

    def __init__(self, adapter: FilesystemAdapterProtocol | None = None) -> None:
        """Create storage using the provided filesystem adapter."""
        self._fs: FilesystemAdapterProtocol = adapter or FilesystemAdapter()
        self._images_dir = self._fs.root / UPLOAD_IMAGES_DIRNAME

    @property
    def images_dir(self) -> Path:
        return self._images_dir

    def ensure_directory(self) -> Path:
        """Create the image directory if it does not exist; safe to repeat."""
        self._fs.make_dirs(self._images_dir)
        return self._images_dir

    @staticmethod
    def generate_unique_name(original_name: str) -> str:
        """Return ``{ms-timestamp}_{token}{lowercased extension}``.

        Uniqueness relies on timestamp plus randomness; there is no
        collision check.
        """
        token = uuid.uuid4().hex[:13]
        return f"{epoch_millis()}_{token}{file_extension(original_name)}"

    def save(self, stream: BinaryIO, declared_type: str, filename: str) -> UploadResult:
        """Validate and store an uploaded image."""
        validation = validate_image_file(declared_type, filename)
        if not validation.valid:
            logger.warning(
                "Rejected image upload",
                extra={"media_type": declared_type, "file_name": filename},
            )
            return UploadResult.failed(validation.error or "Invalid image file")

        try:
            directory = self.ensure_directory()
            unique_name = self.generate_unique_name(filename)
            size = self._fs.write_atomic(directory / unique_name, stream)
        except Exception as exc:
            logger.exception(
                "Failed to store image",
                extra={"file_name": filename},
            )
            return UploadResult.failed(f"Unable to save file: {exc}")

        file_path = f"{UPLOAD_PUBLIC_PREFIX}{unique_name}"
        logger.info(
            "Image stored successfully",
            extra={"file_path": file_path, "size": size},
        )
        return UploadResult.stored(file_path=file_path, file_name=unique_name)

    def delete(self, stored_path: str) -> bool:
        """Delete a stored image; only managed public paths are accepted."""
        if not stored_path or not stored_path.startswith(UPLOAD_PUBLIC_PREFIX):
            logger.debug("Ignoring unmanaged image path", extra={"path": stored_path})
            return False

        target = self._resolve(stored_path[len(UPLOAD_PUBLIC_PREFIX) :])
        if target is None:
            logger.warning("Rejected image path outside upload directory", extra={"path": stored_path})
            return False

        try:
            if not self._fs.exists(target):
                return False
            self._fs.remove(target)
        except FileNotFoundError:
            return False
        except OSError:
            logger.exception("Failed to delete image", extra={"path": stored_path})
            return False

        logger.info("Image deleted successfully", extra={"path": stored_path})
        return True

    def read(self, file_name: str) -> tuple[bytes, str]:
        """Return the bytes and media type of a stored image."""
        target = self._resolve(file_name)

        if target is None or not self._fs.exists(target):
            raise NotFoundError(
                message="Image not found",
                details={"file_name": file_name},
            )

        content = self._fs.read_bytes(target)
        media_type = EXTENSION_MIME_TYPE_MAP.get(
            file_extension(file_name), "application/octet-stream"
        )
        return content, media_type

    def _resolve(self, file_name: str) -> Path | None:
        """Map a stored name to a path directly inside the image directory."""
        if not file_name or file_name in (".", "..") or any(c in file_name for c in ("/", "\\", "\x00")):
            return None

        try:
            images_dir = self._images_dir.resolve()
            candidate = (images_dir / file_name).resolve()
        except (OSError, ValueError):
            return None

        if candidate.parent != images_dir:
            return None

        return candidate
