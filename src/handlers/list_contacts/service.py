"""
Business logic for contact listing.
"""

from aws_lambda_powertools import Logger

from core.filters.offset_pagination import OffsetPagination
from core.infrastructure.sql.sql_contact_repository import SqlContactRepository
from core.models.contact import Contact
from core.models.errors import ValidationError
from core.models.pagination import PaginationInfo
from core.repositories.contact_repository import ContactRepository

logger = Logger(UTC=True)


class ListService:
    """Application service responsible for listing contacts.

    This service coordinates:
    - Fetching contacts ordered by name, optionally filtered by name
    - Paginating results when a page is requested
    """

    def __init__(self, repository: ContactRepository | None = None) -> None:
        """Initialize list service with required dependencies."""
        self.repository = repository or SqlContactRepository()
        self.pagination = OffsetPagination()

    def list_contacts(
        self,
        *,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[list[Contact], PaginationInfo | None]:
        """List contacts, paginating only when both limit and offset are given."""
        contacts = self.repository.find_all(search=search)

        if limit is None or offset is None:
            logger.info(
                "Contacts listed successfully",
                extra={"search": search, "count": len(contacts)},
            )
            return contacts, None

        is_valid, error = self.pagination.validate(limit, offset)
        if not is_valid:
            raise ValidationError(
                message=error,
                details={"limit": limit, "offset": offset},
            )

        page, total_count, _ = self.pagination.paginate(contacts, offset=offset, limit=limit)

        logger.info(
            "Contacts listed successfully",
            extra={"search": search, "count": len(page), "total_count": total_count},
        )

        return page, self.pagination.page_info(offset, limit, total_count)
