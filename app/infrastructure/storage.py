"""Azure Blob Storage utilities for request attachments."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import (
    BlobSasPermissions,
    BlobServiceClient,
    ContentSettings,
    generate_blob_sas,
)

from app.config import get_settings
from app.domain.errors import StorageError


@lru_cache
def _get_blob_service_client() -> BlobServiceClient:
    settings = get_settings()
    if not settings.azure_storage_connection_string:
        msg = "Azure storage connection string is not configured"
        raise StorageError(msg)
    return BlobServiceClient.from_connection_string(
        settings.azure_storage_connection_string
    )


@lru_cache
def _get_container_client():
    service_client = _get_blob_service_client()
    container_name = get_settings().azure_storage_container_name
    try:
        # Private container: no public_access argument.
        service_client.create_container(container_name)
    except ResourceExistsError:
        pass
    return service_client.get_container_client(container_name)


def upload_blob(
    blob_path: str,
    data: bytes,
    *,
    content_type: Optional[str] = None,
) -> None:
    """Upload ``data`` to the attachments container at ``blob_path``."""

    content_settings = None
    if content_type is not None:
        content_settings = ContentSettings(content_type=content_type)
    try:
        blob_client = _get_container_client().get_blob_client(blob_path)
        blob_client.upload_blob(
            data,
            overwrite=False,
            content_settings=content_settings,
        )
    except AzureError as exc:
        raise StorageError(f"Upload of {blob_path} failed: {exc}") from exc


def delete_blob(blob_path: str) -> None:
    """Delete the blob located at ``blob_path`` if it exists."""

    try:
        blob_client = _get_container_client().get_blob_client(blob_path)
        blob_client.delete_blob()
    except ResourceNotFoundError:
        return
    except AzureError as exc:
        raise StorageError(f"Removal of {blob_path} failed: {exc}") from exc


def generate_download_url(blob_path: str, *, expires_in: int | None = None) -> str:
    """Return a read-only SAS URL for ``blob_path`` valid for ``expires_in`` seconds."""

    settings = get_settings()
    lifetime = expires_in or settings.signed_url_expiry_seconds
    service_client = _get_blob_service_client()
    account_key = getattr(service_client.credential, "account_key", None)
    if not account_key:
        raise StorageError("Signed URLs require a shared key credential")

    sas_token = generate_blob_sas(
        account_name=service_client.account_name,
        container_name=settings.azure_storage_container_name,
        blob_name=blob_path,
        account_key=account_key,
        permission=BlobSasPermissions(read=True),
        expiry=datetime.now(timezone.utc) + timedelta(seconds=lifetime),
    )
    blob_client = _get_container_client().get_blob_client(blob_path)
    return f"{blob_client.url}?{sas_token}"


__all__ = [
    "delete_blob",
    "generate_download_url",
    "upload_blob",
]
