"""Pydantic models for the create contact response."""

from pydantic import BaseModel, Field

from core.models.contact import Contact


class CreateContactResponse(BaseModel):
    """Response model for a successfully created contact."""

    success: bool = True
    data: Contact = Field(..., description="The stored contact record")
    message: str = Field("Contact created successfully", description="Success message")
