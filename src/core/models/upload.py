"""Models describing form submissions and image upload outcomes."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextPart(BaseModel):
    """A plain text value submitted for a form field."""

    kind: Literal["text"] = "text"
    value: str = ""


class FilePart(BaseModel):
    """A file submitted for a form field.

    ``stream`` is any readable binary file object; it is consumed at most once.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["file"] = "file"
    stream: Any = Field(..., description="Readable binary stream with the file content")
    filename: str = Field("", description="Client-side filename")
    media_type: str = Field("", description="Declared media type of the part")


FormPart = TextPart | FilePart


class FileValidationResult(BaseModel):
    """Outcome of checking a file's declared media type and extension."""

    valid: bool
    error: str | None = None


class UploadResult(BaseModel):
    """Outcome of storing an uploaded image."""

    success: bool
    file_path: str | None = Field(None, description="Public path, /uploads/images/<name>")
    file_name: str | None = Field(None, description="Generated unique file name")
    error: str | None = Field(None, description="Reason for failure")

    @classmethod
    def stored(cls, *, file_path: str, file_name: str) -> "UploadResult":
        return cls(success=True, file_path=file_path, file_name=file_name)

    @classmethod
    def failed(cls, error: str) -> "UploadResult":
        return cls(success=False, error=error)
