from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class GetImageRequest(BaseModel):
    """Validation model for get image request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    file_name: StrictStr = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Stored image file name",
    )

    @field_validator("file_name")
    @classmethod
    def validate_plain_file_name(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("file_name must not contain path separators")
        return value
