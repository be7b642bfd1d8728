"""
Pydantic models for list contacts request and response.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import MAX_LIMIT, MIN_LIMIT


class ListContactsRequest(BaseModel):
    """
    Validation model for list contacts API.

    Pagination is applied only when both ``limit`` and ``offset`` are given.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    search: str | None = Field(
        None,
        max_length=255,
        description="Case-insensitive substring match on contact name",
    )

    limit: int | None = Field(
        None,
        ge=MIN_LIMIT,
        le=MAX_LIMIT,
        description=f"Results per page ({MIN_LIMIT}-{MAX_LIMIT})",
    )
    offset: int | None = Field(
        None,
        ge=0,
        description="Pagination offset",
    )

    @field_validator("search")
    @classmethod
    def blank_search_means_all(cls, value: str | None) -> str | None:
        return value or None
