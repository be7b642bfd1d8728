"""Shared contact record models."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictInt, field_validator

from core.models.pagination import PaginationInfo
from core.utils.constants import CONTACT_NUMBER_PATTERN, NAME_MIN_LENGTH

_CONTACT_NUMBER_RE = re.compile(CONTACT_NUMBER_PATTERN)


class ContactFieldRules(BaseModel):
    """Field rules shared by contact create and update payloads."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @field_validator("name", check_fields=False)
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is not None and len(value) < NAME_MIN_LENGTH:
            raise ValueError(f"Name must have at least {NAME_MIN_LENGTH} characters")
        return value

    @field_validator("contact", check_fields=False)
    @classmethod
    def validate_contact(cls, value: str | None) -> str | None:
        if value is not None and not _CONTACT_NUMBER_RE.fullmatch(value):
            raise ValueError("Contact must have exactly 9 digits")
        return value

    @field_validator("picture", check_fields=False)
    @classmethod
    def validate_picture(cls, value: str | None) -> str | None:
        if value is not None and not value:
            raise ValueError("Picture is required")
        return value


class ContactCreate(ContactFieldRules):
    """Validation model for a new contact record."""

    name: str = Field(..., description="Display name")
    contact: str = Field(..., description="Nine-digit contact number")
    email: EmailStr = Field(..., description="Email address")
    picture: str = Field(..., description="Stored image path or external URL")


class ContactUpdate(ContactFieldRules):
    """Validation model for a partial contact update.

    Only the supplied fields are validated; omitted fields keep their
    stored value.
    """

    name: str | None = Field(None, description="Display name")
    contact: str | None = Field(None, description="Nine-digit contact number")
    email: EmailStr | None = Field(None, description="Email address")
    picture: str | None = Field(None, description="Stored image path or external URL")

    def changes(self) -> dict[str, Any]:
        """Return only the non-empty fields of this update."""
        return {
            key: value
            for key, value in self.model_dump(exclude_none=True).items()
            if value != ""
        }


class Contact(BaseModel):
    """Contact record returned by the Contacts API."""

    model_config = ConfigDict(from_attributes=True)

    id: StrictInt = Field(..., description="Store-assigned identifier")
    name: str = Field(..., description="Display name")
    contact: str = Field(..., description="Nine-digit contact number")
    email: str = Field(..., description="Email address")
    picture: str = Field(..., description="Stored image path or external URL")

    created_at: str | None = Field(None, description="ISO-8601 creation timestamp (UTC)")
    updated_at: str | None = Field(None, description="ISO-8601 last update timestamp (UTC)")


class ListContactsResponse(BaseModel):
    """Response body for listing contacts."""

    success: bool = True
    data: list[Contact] = Field(..., description="Contacts ordered by name")
    total: StrictInt = Field(..., description="Number of contacts returned")
    message: str = Field(..., description="Human-readable outcome")
    pagination: PaginationInfo | None = Field(
        None,
        description="Pagination metadata, present only when limit and offset are given",
    )
