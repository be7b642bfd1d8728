"""Custom exception classes for the contact service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_DATABASE,
    ERROR_CODE_DUPLICATE_CONTACT,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_IMAGE_REQUIRED,
    ERROR_CODE_IMAGE_UPLOAD_FAILED,
    ERROR_CODE_NO_FIELDS_TO_UPDATE,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_VALIDATION_FAILED,
)


class ContactServiceError(Exception):
    """
    Base exception for all contact service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(ContactServiceError):
    """Raised when one or more contact fields are malformed."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ConflictError(ContactServiceError):
    """Raised when the contact number or email already belongs to another record."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DUPLICATE_CONTACT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(ContactServiceError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UploadError(ContactServiceError):
    """Raised when an uploaded image is rejected or cannot be stored."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_IMAGE_UPLOAD_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MissingImageError(ContactServiceError):
    """Raised when a contact is created with neither an uploaded file nor a picture value."""

    def __init__(
        self,
        *,
        message: str = "A picture is required to create a contact",
        error_code: str = ERROR_CODE_IMAGE_REQUIRED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NoFieldsError(ContactServiceError):
    """Raised when an update carries no effective field changes."""

    def __init__(
        self,
        *,
        message: str = "No fields to update",
        error_code: str = ERROR_CODE_NO_FIELDS_TO_UPDATE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PayloadTooLargeError(ContactServiceError):
    """Raised when the request body exceeds the allowed upload size."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_SIZE_EXCEEDED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DatabaseError(ContactServiceError):
    """Raised when a relational store operation fails unexpectedly."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DATABASE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
