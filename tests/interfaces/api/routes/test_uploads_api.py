"""API tests for the onboarding image upload endpoint."""

from __future__ import annotations

import base64

import pytest

from app.application.use_cases import uploads as uploads_module
from app.domain.exceptions import ServiceNotConfiguredError

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


@pytest.fixture()
def uploaded(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    calls: list[dict] = []

    def fake_upload_blob(blob_path, data, *, content_type=None):
        calls.append({"path": blob_path, "data": data, "content_type": content_type})
        return f"https://storage.example/uploads/{blob_path}"

    monkeypatch.setattr(uploads_module, "upload_blob", fake_upload_blob)
    return calls


def test_upload_without_file_data_is_rejected(client, uploaded) -> None:
    response = client.post(
        "/api/onboarding/upload-image",
        json={"fileName": "logo.png", "businessId": "B1"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"
    assert uploaded == []


def test_upload_requires_an_owner(client, uploaded) -> None:
    response = client.post(
        "/api/onboarding/upload-image",
        json={"fileData": base64.b64encode(PNG_BYTES).decode(), "fileName": "logo.png"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing required fields",
        "details": "businessId or userId",
    }
    assert uploaded == []


def test_upload_data_url_for_business(client, uploaded) -> None:
    encoded = base64.b64encode(PNG_BYTES).decode()
    response = client.post(
        "/api/onboarding/upload-image",
        json={
            "fileData": f"data:image/png;base64,{encoded}",
            "fileName": "my logo.png",
            "businessId": "B1",
            "imageType": "logo",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["path"].startswith("business/B1/logo/")
    assert body["path"].endswith("-my-logo.png")
    assert body["url"] == f"https://storage.example/uploads/{body['path']}"

    assert len(uploaded) == 1
    assert uploaded[0]["data"] == PNG_BYTES
    assert uploaded[0]["content_type"] == "image/png"


def test_upload_for_user_uses_explicit_content_type(client, uploaded) -> None:
    response = client.post(
        "/api/onboarding/upload-image",
        json={
            "fileData": base64.b64encode(PNG_BYTES).decode(),
            "fileName": "avatar.jpg",
            "userId": "user-1",
            "contentType": "image/jpeg",
        },
    )

    assert response.status_code == 200
    assert response.json()["path"].startswith("users/user-1/image/")
    assert uploaded[0]["content_type"] == "image/jpeg"


def test_upload_with_invalid_base64_is_rejected(client, uploaded) -> None:
    response = client.post(
        "/api/onboarding/upload-image",
        json={"fileData": "not base64!!", "fileName": "logo.png", "businessId": "B1"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid file data"
    assert uploaded == []


def test_upload_without_storage_configuration(client, monkeypatch) -> None:
    def unconfigured(*args, **kwargs):
        raise ServiceNotConfiguredError("Azure storage connection string is not configured")

    monkeypatch.setattr(uploads_module, "upload_blob", unconfigured)

    response = client.post(
        "/api/onboarding/upload-image",
        json={
            "fileData": base64.b64encode(PNG_BYTES).decode(),
            "fileName": "logo.png",
            "businessId": "B1",
        },
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Azure storage connection string is not configured"}
