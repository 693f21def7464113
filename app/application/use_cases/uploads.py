"""Use case for storing onboarding images in blob storage."""

from __future__ import annotations

import base64
import binascii
import logging
import re
import uuid
from dataclasses import dataclass

from app.domain.exceptions import RequestValidationFailed
from app.infrastructure.storage import upload_blob

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_TYPE = "image"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+\-]+/[\w.+\-]+)?(;[^,]*)?;base64,", re.I)
_UNSAFE_PATH_CHARS = re.compile(r"[^A-Za-z0-9._\-]+")


@dataclass(frozen=True)
class UploadedImage:
    path: str
    url: str


def _sanitize_segment(value: str) -> str:
    cleaned = _UNSAFE_PATH_CHARS.sub("-", value.strip()).strip("-.")
    return cleaned or "file"


def decode_file_data(file_data: str) -> tuple[bytes, str | None]:
    """Decode base64 ``file_data``, accepting an optional ``data:`` URL prefix.

    Returns the raw bytes and the MIME type named by the data URL, if any.
    """

    content_type: str | None = None
    payload = file_data.strip()
    match = _DATA_URL.match(payload)
    if match:
        content_type = match.group("mime")
        payload = payload[match.end():]
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise RequestValidationFailed(
            "Invalid file data", details="fileData must be base64 encoded"
        ) from exc
    if not data:
        raise RequestValidationFailed("Invalid file data", details="fileData is empty")
    return data, content_type


def build_blob_path(
    *,
    file_name: str,
    business_id: str | None = None,
    user_id: str | None = None,
    image_type: str | None = None,
) -> str:
    if business_id:
        owner = f"business/{_sanitize_segment(business_id)}"
    else:
        owner = f"users/{_sanitize_segment(user_id or '')}"
    folder = _sanitize_segment(image_type or DEFAULT_IMAGE_TYPE)
    return f"{owner}/{folder}/{uuid.uuid4().hex}-{_sanitize_segment(file_name)}"


def upload_onboarding_image(
    *,
    file_data: str | None,
    file_name: str | None,
    business_id: str | None = None,
    user_id: str | None = None,
    image_type: str | None = None,
    content_type: str | None = None,
) -> UploadedImage:
    """Store one image for a business or user and return its path and URL."""

    missing: list[str] = []
    if not file_data:
        missing.append("fileData")
    if not file_name:
        missing.append("fileName")
    if not (business_id or user_id):
        missing.append("businessId or userId")
    if missing:
        raise RequestValidationFailed("Missing required fields", details=", ".join(missing))

    data, detected_type = decode_file_data(file_data)
    path = build_blob_path(
        file_name=file_name,
        business_id=business_id,
        user_id=user_id,
        image_type=image_type,
    )
    url = upload_blob(
        path,
        data,
        content_type=content_type or detected_type or DEFAULT_CONTENT_TYPE,
    )
    logger.info("Uploaded %d bytes to %s", len(data), path)
    return UploadedImage(path=path, url=url)


__all__ = [
    "UploadedImage",
    "build_blob_path",
    "decode_file_data",
    "upload_onboarding_image",
]
