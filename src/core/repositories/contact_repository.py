"""Abstract contract for contact record persistence."""

from abc import ABC, abstractmethod
from typing import Any

from core.models.contact import Contact


class ContactRepository(ABC):
    """Contract for storing and retrieving contact records.

    Implementations could be PostgreSQL, MySQL, SQLite, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def create(self, data: dict[str, Any]) -> Contact:
        """Validate and insert a new contact.

        Args:
            data: Mapping with name, contact, email and picture

        Returns:
            The stored contact, read back from the store

        Raises:
            ValidationError: If any field is missing or malformed
            ConflictError: If the contact number or email is already used
            DatabaseError: If the insert fails for other reasons
        """

    @abstractmethod
    def find_by_id(self, contact_id: int) -> Contact:
        """Fetch a single contact.

        Raises:
            NotFoundError: If the contact does not exist
            DatabaseError: If the query fails
        """

    @abstractmethod
    def find_all(self, search: str | None = None) -> list[Contact]:
        """List contacts ordered by name.

        Args:
            search: Optional case-insensitive substring matched against name

        Raises:
            DatabaseError: If the query fails
        """

    @abstractmethod
    def update(self, contact_id: int, partial: dict[str, Any]) -> Contact:
        """Apply a partial update.

        Only the supplied non-empty fields are validated and written.

        Raises:
            NotFoundError: If the contact does not exist
            ValidationError: If a supplied field is malformed
            ConflictError: If the new contact number or email belongs to another record
            NoFieldsError: If no field remains to update
            DatabaseError: If the update fails for other reasons
        """

    @abstractmethod
    def delete(self, contact_id: int) -> None:
        """Remove a contact row. Does not touch the associated image.

        Raises:
            NotFoundError: If the contact does not exist
            DatabaseError: If the delete fails
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored contacts.

        Raises:
            DatabaseError: If the query fails
        """

    @abstractmethod
    def health_check(self) -> bool:
        """Return True when the store is reachable; never raises."""
