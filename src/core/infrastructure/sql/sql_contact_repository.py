"""SQL-backed implementation of ContactRepository."""

from typing import Any, TypeVar

from aws_lambda_powertools import Logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.infrastructure.adapters.sql_adapter import SqlAdapter
from core.infrastructure.sql.schema import ContactRow
from core.models.contact import Contact, ContactCreate, ContactUpdate
from core.models.errors import (
    ConflictError,
    ContactServiceError,
    DatabaseError,
    NoFieldsError,
    NotFoundError,
    ValidationError,
)
from core.repositories.contact_repository import ContactRepository
from core.utils.constants import CONTACT_FIELDS
from core.utils.time import to_iso
from core.utils.validators import sanitize_validation_errors, summarize_validation_errors

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = Logger(UTC=True)


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlContactRepository(ContactRepository):
    """Relational contact storage with validation and uniqueness checks.

    All SQLAlchemy errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: SqlAdapter | None = None) -> None:
        """Initialize with a SQL adapter."""
        self._db = adapter or SqlAdapter()

    def create(self, data: dict[str, Any]) -> Contact:
        payload = self._validate(ContactCreate, data)

        logger.debug("Creating contact", extra={"contact": payload.contact})

        try:
            with self._db.session() as session, session.begin():
                self._check_uniqueness(session, contact=payload.contact, email=payload.email)

                row = ContactRow(**payload.model_dump())
                session.add(row)
                session.flush()
                contact_id = row.id

        except ContactServiceError:
            raise

        except IntegrityError as exc:
            logger.warning("Unique constraint rejected contact insert")
            raise ConflictError(
                message="Contact or email already exists",
                details={"contact": payload.contact, "email": payload.email},
            ) from exc

        except SQLAlchemyError as exc:
            logger.exception("Unexpected error creating contact")
            raise DatabaseError(
                message="Unable to save contact at this time",
            ) from exc

        logger.info("Contact created", extra={"contact_id": contact_id})
        return self.find_by_id(contact_id)

    def find_by_id(self, contact_id: int) -> Contact:
        logger.debug("Fetching contact", extra={"contact_id": contact_id})

        try:
            with self._db.session() as session:
                row = session.get(ContactRow, contact_id)
                if row is None:
                    raise NotFoundError(
                        message="Contact not found",
                        details={"contact_id": contact_id},
                    )
                return self._to_contact(row)

        except ContactServiceError:
            raise

        except SQLAlchemyError as exc:
            logger.exception("Unexpected error fetching contact")
            raise DatabaseError(
                message="Unable to retrieve contact",
                details={"contact_id": contact_id},
            ) from exc

    def find_all(self, search: str | None = None) -> list[Contact]:
        statement = select(ContactRow).order_by(ContactRow.name, ContactRow.id)

        if search and search.strip():
            pattern = _like_pattern(search.strip().lower())
            statement = statement.where(func.lower(ContactRow.name).like(pattern, escape="\\"))

        try:
            with self._db.session() as session:
                return [self._to_contact(row) for row in session.scalars(statement)]

        except SQLAlchemyError as exc:
            logger.exception("Unexpected error listing contacts")
            raise DatabaseError(message="Unable to list contacts") from exc

    def update(self, contact_id: int, partial: dict[str, Any]) -> Contact:
        supplied = {
            key: value
            for key, value in partial.items()
            if key in CONTACT_FIELDS and value is not None and value != ""
        }

        try:
            with self._db.session() as session, session.begin():
                row = session.get(ContactRow, contact_id)
                if row is None:
                    raise NotFoundError(
                        message="Contact not found",
                        details={"contact_id": contact_id},
                    )

                changes = self._validate(ContactUpdate, supplied).changes()
                if not changes:
                    raise NoFieldsError(details={"contact_id": contact_id})

                if "contact" in changes or "email" in changes:
                    self._check_uniqueness(
                        session,
                        contact=changes.get("contact"),
                        email=changes.get("email"),
                        exclude_id=contact_id,
                    )

                for key, value in changes.items():
                    setattr(row, key, value)

        except ContactServiceError:
            raise

        except IntegrityError as exc:
            logger.warning("Unique constraint rejected contact update")
            raise ConflictError(
                message="Contact or email already exists",
                details={"contact_id": contact_id},
            ) from exc

        except SQLAlchemyError as exc:
            logger.exception("Unexpected error updating contact")
            raise DatabaseError(
                message="Unable to update contact at this time",
                details={"contact_id": contact_id},
            ) from exc

        logger.info(
            "Contact updated",
            extra={"contact_id": contact_id, "fields": sorted(changes)},
        )
        return self.find_by_id(contact_id)

    def delete(self, contact_id: int) -> None:
        try:
            with self._db.session() as session, session.begin():
                row = session.get(ContactRow, contact_id)
                if row is None:
                    raise NotFoundError(
                        message="Contact not found",
                        details={"contact_id": contact_id},
                    )
                session.delete(row)

        except ContactServiceError:
            raise

        except SQLAlchemyError as exc:
            logger.exception("Unexpected error deleting contact")
            raise DatabaseError(
                message="Unable to delete contact at this time",
                details={"contact_id": contact_id},
            ) from exc

        logger.info("Contact deleted", extra={"contact_id": contact_id})

    def count(self) -> int:
        try:
            with self._db.session() as session:
                return int(session.scalar(select(func.count()).select_from(ContactRow)) or 0)
        except SQLAlchemyError as exc:
            logger.exception("Unexpected error counting contacts")
            raise DatabaseError(message="Unable to count contacts") from exc

    def health_check(self) -> bool:
        """Return True when the store answers a trivial query."""
        try:
            self._db.ping()
        except SQLAlchemyError:
            logger.exception("Database health check failed")
            return False
        return True

    @staticmethod
    def _validate(model: type[ModelT], data: dict[str, Any]) -> ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as exc:
            errors = sanitize_validation_errors(exc.errors())
            raise ValidationError(
                message=f"Validation failed: {summarize_validation_errors(errors)}",
                details={"errors": errors},
            ) from exc

    @staticmethod
    def _check_uniqueness(
        session: Session,
        *,
        contact: str | None = None,
        email: str | None = None,
        exclude_id: int | None = None,
    ) -> None:
        conditions = []
        if contact:
            conditions.append(ContactRow.contact == contact)
        if email:
            conditions.append(ContactRow.email == email)

        if not conditions:
            return

        statement = select(ContactRow.id).where(or_(*conditions))
        if exclude_id is not None:
            statement = statement.where(ContactRow.id != exclude_id)

        if session.scalars(statement.limit(1)).first() is not None:
            raise ConflictError(
                message="Contact or email already exists",
                details={"contact": contact, "email": email},
            )

    @staticmethod
    def _to_contact(row: ContactRow) -> Contact:
        return Contact(
            id=row.id,
            name=row.name,
            contact=row.contact,
            email=row.email,
            picture=row.picture,
            created_at=to_iso(row.created_at),
            updated_at=to_iso(row.updated_at),
        )
