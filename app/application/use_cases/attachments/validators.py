"""Boundary checks for uploaded attachment files."""

from __future__ import annotations

from pathlib import PurePosixPath
from uuid import uuid4

from app.config import get_settings
from app.domain.errors import AttachmentValidationError

ALLOWED_MIME_TYPES: frozenset[str] = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "text/plain",
        "text/csv",
    }
)


def max_attachment_bytes() -> int:
    return get_settings().max_attachment_bytes


def validate_attachment(file_name: str, size: int, content_type: str | None) -> str:
    """Return the normalized MIME type or raise :class:`AttachmentValidationError`."""

    if not (file_name or "").strip():
        raise AttachmentValidationError("File name not provided")
    mime_type = (content_type or "").split(";", 1)[0].strip().lower()
    if mime_type not in ALLOWED_MIME_TYPES:
        raise AttachmentValidationError(f"{file_name}: File type not allowed")
    limit = max_attachment_bytes()
    if size > limit:
        raise AttachmentValidationError(
            f"{file_name}: File size exceeds {format_file_size(limit)} limit",
            too_large=True,
        )
    return mime_type


def build_object_path(identity_id: str, request_id: str, file_name: str) -> str:
    """Return ``{identity}/{request}/{uuid}.{ext}`` for a new upload."""

    extension = PurePosixPath(file_name.replace("\\", "/")).suffix.lower()
    return f"{identity_id}/{request_id}/{uuid4()}{extension}"


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


__all__ = [
    "ALLOWED_MIME_TYPES",
    "build_object_path",
    "format_file_size",
    "max_attachment_bytes",
    "validate_attachment",
]
