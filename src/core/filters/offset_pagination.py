"""
Offset-based pagination utilities.
"""

from typing import TypeVar

from core.models.pagination import PaginationInfo
from core.utils.constants import MAX_LIMIT, MIN_LIMIT

ItemT = TypeVar("ItemT")


class OffsetPagination:
    """
    Offset-based pagination helper.

    Typical usage:
    1. Validate offset and limit parameters
    2. Apply pagination to a list of items
    3. Return the page along with its metadata
    """

    @staticmethod
    def paginate(
        items: list[ItemT],
        offset: int,
        limit: int,
    ) -> tuple[list[ItemT], int, bool]:
        """
        Paginate a list of items using offset and limit.

        Returns:
            A tuple containing:
            - paginated_items: List of items for the current page
            - total_count: Total number of items before pagination
            - has_more: True if more items exist beyond this page

        Example:
            paginate([1, 2, 3, 4, 5], offset=0, limit=2)
            → ([1, 2], 5, True)
        """
        total_count = len(items)
        paginated_items = items[offset : offset + limit]
        has_more = offset + limit < total_count

        return paginated_items, total_count, has_more

    @staticmethod
    def validate(limit: int, offset: int) -> tuple[bool, str]:
        """
        Validate pagination parameters.

        Validation rules:
        - limit must be within [MIN_LIMIT, MAX_LIMIT]
        - offset must be zero or positive
        """
        if limit < MIN_LIMIT:
            return False, f"Limit must be at least {MIN_LIMIT}"

        if limit > MAX_LIMIT:
            return False, f"Limit must not exceed {MAX_LIMIT}"

        if offset < 0:
            return False, "Offset must be zero or a positive integer"

        return True, ""

    @staticmethod
    def page_info(offset: int, limit: int, total_count: int) -> PaginationInfo:
        """Build the pagination metadata exposed to API consumers."""
        has_more = offset + limit < total_count

        return PaginationInfo(
            limit=limit,
            offset=offset,
            total_count=total_count,
            has_more=has_more,
            next_offset=offset + limit if has_more else None,
        )
