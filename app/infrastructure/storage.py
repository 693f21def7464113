"""Azure Blob Storage utilities for uploaded files."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from azure.core.exceptions import AzureError, ResourceExistsError
from azure.storage.blob import BlobServiceClient, ContainerClient, ContentSettings

from app.config import get_settings
from app.domain.exceptions import ServiceNotConfiguredError, UpstreamServiceError


@lru_cache
def _get_blob_service_client() -> BlobServiceClient:
    settings = get_settings()
    if not settings.azure_storage_connection_string:
        msg = "Azure storage connection string is not configured"
        raise ServiceNotConfiguredError(msg)
    return BlobServiceClient.from_connection_string(
        settings.azure_storage_connection_string
    )


@lru_cache
def _get_container_name() -> str:
    settings = get_settings()
    if not settings.azure_storage_container_name:
        msg = "Azure storage container name is not configured"
        raise ServiceNotConfiguredError(msg)
    return settings.azure_storage_container_name


@lru_cache
def _get_container_client() -> ContainerClient:
    service_client = _get_blob_service_client()
    container_name = _get_container_name()
    try:
        service_client.create_container(container_name)
    except ResourceExistsError:
        pass
    return service_client.get_container_client(container_name)


def reset_storage_clients() -> None:
    """Drop cached clients so new settings take effect."""

    _get_blob_service_client.cache_clear()
    _get_container_name.cache_clear()
    _get_container_client.cache_clear()


def upload_blob(
    blob_path: str,
    data: bytes,
    *,
    content_type: Optional[str] = None,
) -> str:
    """Upload ``data`` to the configured storage container and return its URL."""

    container_client = _get_container_client()
    blob_client = container_client.get_blob_client(blob_path)
    content_settings = None
    if content_type is not None:
        content_settings = ContentSettings(content_type=content_type)
    try:
        blob_client.upload_blob(
            data,
            overwrite=True,
            content_settings=content_settings,
        )
    except AzureError as exc:
        raise UpstreamServiceError("Failed to upload file", details=str(exc)) from exc
    return blob_client.url


__all__ = [
    "upload_blob",
    "reset_storage_clients",
]
