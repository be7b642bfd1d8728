"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_ID = "INVALID_ID"
ERROR_CODE_INVALID_BODY = "INVALID_BODY"
ERROR_CODE_NO_FIELDS_TO_UPDATE = "NO_FIELDS_TO_UPDATE"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Conflict Errors
ERROR_CODE_DUPLICATE_CONTACT = "DUPLICATE_CONTACT"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"

# Image Errors
ERROR_CODE_IMAGE_UPLOAD_FAILED = "IMAGE_UPLOAD_FAILED"
ERROR_CODE_IMAGE_REQUIRED = "IMAGE_REQUIRED"

# Database Errors
ERROR_CODE_DATABASE = "DATABASE_ERROR"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# File Upload Constraints
# ============================================================================

DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB in bytes

ALLOWED_MIME_TYPES: Final[tuple[str, ...]] = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
)

ALLOWED_EXTENSIONS: Final[tuple[str, ...]] = (".jpg", ".jpeg", ".png", ".gif", ".webp")

EXTENSION_MIME_TYPE_MAP: Final[dict[str, str]] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

PICTURE_FIELD = "picture"
UPLOAD_PUBLIC_PREFIX = "/uploads/images/"
UPLOAD_IMAGES_DIRNAME = "images"
DEFAULT_UPLOAD_ROOT = "uploads"

# ============================================================================
# Contact Constraints
# ============================================================================

NAME_MIN_LENGTH = 5
CONTACT_NUMBER_PATTERN = r"[0-9]{9}"
CONTACT_FIELDS: Final[tuple[str, ...]] = ("name", "contact", "email", "picture")

# ============================================================================
# Pagination Constraints
# ============================================================================

MIN_LIMIT = 1
MAX_LIMIT = 100

# ============================================================================
# Database Configuration
# ============================================================================

DEFAULT_DATABASE_URL = "sqlite:///contacts.db"
DEFAULT_DB_POOL_SIZE = 10
DEFAULT_DB_POOL_TIMEOUT = 60

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Requested-With"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_DATABASE_URL = "DATABASE_URL"
ENV_DB_POOL_SIZE = "DB_POOL_SIZE"
ENV_DB_POOL_TIMEOUT = "DB_POOL_TIMEOUT"
ENV_UPLOAD_ROOT = "UPLOAD_ROOT"
ENV_MAX_FILE_SIZE = "MAX_FILE_SIZE"
ENV_CORS_ORIGIN = "CORS_ORIGIN"
ENV_ENVIRONMENT = "ENVIRONMENT"

# ============================================================================
# Service Metadata
# ============================================================================

SERVICE_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT = "development"

# ============================================================================
# Helper Functions
# ============================================================================


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
