"""Pydantic models for the get contact response."""

from pydantic import BaseModel, Field

from core.models.contact import Contact


class GetContactResponse(BaseModel):
    """Response model for a single contact."""

    success: bool = True
    data: Contact
    message: str = Field("Contact found successfully", description="Success message")
