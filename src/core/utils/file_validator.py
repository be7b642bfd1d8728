"""Allow-list validation for uploaded image files."""

from pathlib import PurePath

from core.models.upload import FileValidationResult
from core.utils.constants import ALLOWED_EXTENSIONS, ALLOWED_MIME_TYPES


def file_extension(filename: str) -> str:
    """Return the lowercased extension of ``filename`` including the dot, or ''."""
    return PurePath(filename or "").suffix.lower()


def validate_image_file(media_type: str, filename: str) -> FileValidationResult:
    """Check an upload's declared media type and filename extension.

    The declared values are trusted; file content is not inspected.

    Args:
        media_type: Media type declared by the client for the file part
        filename: Client-side filename

    Returns:
        A valid result, or an invalid one whose error names the allowed set
        for the check that failed
    """
    if media_type not in ALLOWED_MIME_TYPES:
        return FileValidationResult(
            valid=False,
            error=(
                f"File type '{media_type}' is not allowed. "
                f"Allowed types: {', '.join(ALLOWED_MIME_TYPES)}"
            ),
        )

    extension = file_extension(filename)
    if extension not in ALLOWED_EXTENSIONS:
        return FileValidationResult(
            valid=False,
            error=(
                f"File extension '{extension}' is not allowed. "
                f"Allowed extensions: {', '.join(ALLOWED_EXTENSIONS)}"
            ),
        )

    return FileValidationResult(valid=True)
