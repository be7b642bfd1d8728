"""Pydantic models for the delete contact response."""

from pydantic import BaseModel, Field, StrictInt


class DeletedContact(BaseModel):
    """Summary of a deleted contact."""

    id: StrictInt = Field(..., description="Identifier of the deleted contact")
    picture: str = Field(..., description="Picture value the contact held")
    image_removed: bool = Field(..., description="Whether a managed image file was removed")
    deleted_at: str = Field(..., description="ISO-8601 deletion timestamp (UTC)")


class DeleteContactResponse(BaseModel):
    """Response model for a successful deletion."""

    success: bool = True
    data: DeletedContact
    message: str = Field("Contact deleted successfully", description="Success message")
