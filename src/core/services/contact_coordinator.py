"""Business logic coordinating contact records with their stored images.

A contact submission may carry an image file. This module decides what
happens to the contact's picture, and sequences image storage and record
persistence so that every failure leaves a defined, reportable state:

- The new image is stored before the record is written.
- If the record write fails, the new image is removed (best effort).
- A replaced image is removed only after the record points at its successor.

There is no transaction spanning disk and database; a crash between steps
can still leave an orphaned image.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field

from core.infrastructure.local.disk_image_storage import LocalDiskImageStorage
from core.infrastructure.sql.sql_contact_repository import SqlContactRepository
from core.models.contact import Contact
from core.models.errors import MissingImageError, UploadError, ValidationError
from core.models.upload import FilePart, FormPart, TextPart, UploadResult
from core.repositories.contact_repository import ContactRepository
from core.repositories.storage_repository import ImageStorageRepository
from core.utils.constants import CONTACT_FIELDS, PICTURE_FIELD, UPLOAD_PUBLIC_PREFIX
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


class ProcessedForm(BaseModel):
    """Text fields of a submission plus the outcome of storing its image."""

    fields: dict[str, str] = Field(default_factory=dict)
    upload: UploadResult | None = None

    @property
    def stored_path(self) -> str | None:
        if self.upload is not None and self.upload.success:
            return self.upload.file_path
        return None


def _non_empty(fields: Mapping[str, str]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None and value != ""}


def _check_picture_text(picture: str | None, current: str | None = None) -> None:
    """Managed image paths are only accepted as the record's own picture."""
    picture = (picture or "").strip()
    if picture and picture.startswith(UPLOAD_PUBLIC_PREFIX) and picture != current:
        raise ValidationError(
            message="Picture must be an uploaded file or an external URL",
            details={"field": PICTURE_FIELD},
        )


class ContactCoordinator:
    """Application service for creating, updating and deleting contacts.

    This service orchestrates:
    - Splitting a submission into text fields and the picture file
    - Storing the uploaded picture
    - Choosing the effective picture value
    - Writing the record and releasing images that are no longer referenced
    """

    def __init__(
        self,
        repository: ContactRepository | None = None,
        storage: ImageStorageRepository | None = None,
    ) -> None:
        """Initialize the coordinator with its infrastructure dependencies."""
        self.repository = repository or SqlContactRepository()
        self.storage = storage or LocalDiskImageStorage()

    def process_form(self, parts: Mapping[str, FormPart]) -> ProcessedForm:
        """Separate text fields from the picture file and store the file.

        Only ``picture`` may carry a file. Unknown text fields are ignored.

        Raises:
            ValidationError: If a file is submitted under another field
            UploadError: If the picture is rejected or cannot be stored
        """
        fields: dict[str, str] = {}
        file_part: FilePart | None = None

        for name, part in parts.items():
            if isinstance(part, FilePart):
                if name != PICTURE_FIELD:
                    raise ValidationError(
                        message=f"Unexpected file field '{name}'; only '{PICTURE_FIELD}' accepts a file",
                        details={"field": name},
                    )
                file_part = part
            elif isinstance(part, TextPart) and name in CONTACT_FIELDS:
                fields[name] = part.value

        if file_part is None:
            return ProcessedForm(fields=fields)

        upload = self.storage.save(file_part.stream, file_part.media_type, file_part.filename)
        if not upload.success:
            raise UploadError(
                message=upload.error or "Unable to upload image",
                details={"file_name": file_part.filename},
            )

        return ProcessedForm(fields=fields, upload=upload)

    def create_contact(self, parts: Mapping[str, FormPart]) -> Contact:
        """Create a contact from a submission.

        A picture is mandatory: either an uploaded file or a ``picture``
        text value (for example an external URL).

        Raises:
            ValidationError, UploadError, MissingImageError, ConflictError,
            DatabaseError
        """
        form = self.process_form(parts)
        fields = _non_empty(form.fields)

        if form.stored_path:
            fields[PICTURE_FIELD] = form.stored_path
        elif not fields.get(PICTURE_FIELD):
            raise MissingImageError()
        else:
            _check_picture_text(fields[PICTURE_FIELD])

        try:
            contact = self.repository.create(fields)
        except Exception:
            self._release_upload(form, reason="contact creation failed")
            raise

        logger.info(
            "Contact created",
            extra={"contact_id": contact.id, "picture": contact.picture},
        )
        return contact

    def update_contact(self, contact_id: int, parts: Mapping[str, FormPart]) -> Contact:
        """Apply a partial update from a submission.

        Without a new file the stored picture is kept, unless a ``picture``
        text value is supplied. Blank fields never overwrite stored values.

        Raises:
            NotFoundError, ValidationError, UploadError, ConflictError,
            NoFieldsError, DatabaseError
        """
        existing = self.repository.find_by_id(contact_id)
        form = self.process_form(parts)
        fields = _non_empty(form.fields)

        # Without a stored file or picture text the partial update leaves
        # the existing picture untouched.
        if form.stored_path:
            fields[PICTURE_FIELD] = form.stored_path
        else:
            _check_picture_text(fields.get(PICTURE_FIELD), current=existing.picture)

        try:
            contact = self.repository.update(contact_id, fields)
        except Exception:
            self._release_upload(form, reason="contact update failed")
            raise

        if existing.picture and existing.picture != contact.picture:
            removed = self.storage.delete(existing.picture)
            logger.info(
                "Released replaced picture",
                extra={
                    "contact_id": contact_id,
                    "picture": existing.picture,
                    "removed": removed,
                },
            )

        return contact

    def delete_contact(self, contact_id: int) -> dict[str, Any]:
        """Delete a contact, then release its stored picture.

        Returns:
            A dictionary containing deletion confirmation details

        Raises:
            NotFoundError, DatabaseError
        """
        existing = self.repository.find_by_id(contact_id)
        self.repository.delete(contact_id)

        image_removed = self.storage.delete(existing.picture)
        if not image_removed:
            logger.debug(
                "No managed picture removed for deleted contact",
                extra={"contact_id": contact_id, "picture": existing.picture},
            )

        return {
            "id": contact_id,
            "picture": existing.picture,
            "image_removed": image_removed,
            "deleted_at": utc_now_iso(),
        }

    def _release_upload(self, form: ProcessedForm, *, reason: str) -> None:
        """Best-effort cleanup to avoid orphaned images."""
        stored_path = form.stored_path
        if stored_path is None:
            return

        try:
            removed = self.storage.delete(stored_path)
        except Exception:
            logger.warning(
                "Failed to clean up stored picture",
                extra={"picture": stored_path, "reason": reason},
            )
            return

        logger.info(
            "Cleaned up stored picture",
            extra={"picture": stored_path, "reason": reason, "removed": removed},
        )
