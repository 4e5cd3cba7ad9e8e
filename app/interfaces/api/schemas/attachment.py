"""Attachment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AttachmentRead(BaseModel):
    id: str
    request_id: str
    user_id: str
    file_name: str
    file_path: str
    file_size: int
    file_type: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class UploadFailureRead(BaseModel):
    file_name: str
    reason: str

    model_config = ConfigDict(from_attributes=True)


class AttachmentUploadResponse(BaseModel):
    summary: str
    uploaded: list[AttachmentRead]
    failures: list[UploadFailureRead]


class AttachmentDownloadRead(BaseModel):
    url: str
    expires_in: int
    file_name: str

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "AttachmentDownloadRead",
    "AttachmentRead",
    "AttachmentUploadResponse",
    "UploadFailureRead",
]
