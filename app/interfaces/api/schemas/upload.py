"""Schemas for the onboarding image upload endpoint."""

from pydantic import AliasChoices, BaseModel, Field


class ImageUploadRequest(BaseModel):
    """Fields are optional here so the use case can report every missing one."""

    file_data: str | None = Field(
        None, validation_alias=AliasChoices("fileData", "file_data")
    )
    file_name: str | None = Field(
        None, validation_alias=AliasChoices("fileName", "file_name")
    )
    business_id: str | None = Field(
        None, validation_alias=AliasChoices("businessId", "business_id")
    )
    user_id: str | None = Field(
        None, validation_alias=AliasChoices("userId", "user_id")
    )
    image_type: str | None = Field(
        None, validation_alias=AliasChoices("imageType", "image_type")
    )
    content_type: str | None = Field(
        None, validation_alias=AliasChoices("contentType", "content_type")
    )


class ImageUploadResponse(BaseModel):
    success: bool = True
    path: str
    url: str
