"""Endpoint for onboarding image uploads."""

from __future__ import annotations

from fastapi import APIRouter

from app.application.use_cases.uploads import upload_onboarding_image
from app.interfaces.api.schemas import ImageUploadRequest, ImageUploadResponse

router = APIRouter(prefix="/api/onboarding", tags=["onboarding"])


@router.post("/upload-image", response_model=ImageUploadResponse)
def upload_image(payload: ImageUploadRequest) -> ImageUploadResponse:
    """Store a base64 encoded image for a business or user."""

    uploaded = upload_onboarding_image(
        file_data=payload.file_data,
        file_name=payload.file_name,
        business_id=payload.business_id,
        user_id=payload.user_id,
        image_type=payload.image_type,
        content_type=payload.content_type,
    )
    return ImageUploadResponse(path=uploaded.path, url=uploaded.url)


__all__ = ["router"]
