"""Pydantic models for the update contact response."""

from pydantic import BaseModel, Field

from core.models.contact import Contact


class UpdateContactResponse(BaseModel):
    """Response model for a successfully updated contact."""

    success: bool = True
    data: Contact = Field(..., description="The contact after the update")
    message: str = Field("Contact updated successfully", description="Success message")
