"""Offset pagination metadata for contact listings."""

from pydantic import BaseModel, Field, StrictBool, StrictInt


class PaginationInfo(BaseModel):
    """Where a contact page sits within the full search result."""

    limit: StrictInt = Field(..., ge=1, description="Page size requested by the client")
    offset: StrictInt = Field(..., ge=0, description="Index of the first contact on this page")
    total_count: StrictInt = Field(..., ge=0, description="Contacts matching the search before paging")
    has_more: StrictBool = Field(..., description="Whether contacts remain after this page")
    next_offset: StrictInt | None = Field(None, description="Offset of the following page")
