"""Use cases for request attachments."""

from .manage_attachments import (
    SignedDownload,
    delete_attachment,
    get_attachment,
    get_attachment_download,
    list_attachments,
)
from .upload_attachments import (
    UploadFailure,
    UploadReport,
    UploadedFile,
    upload_attachment,
    upload_attachments,
)
from .validators import ALLOWED_MIME_TYPES, validate_attachment

__all__ = [
    "ALLOWED_MIME_TYPES",
    "SignedDownload",
    "UploadFailure",
    "UploadReport",
    "UploadedFile",
    "delete_attachment",
    "get_attachment",
    "get_attachment_download",
    "list_attachments",
    "upload_attachment",
    "upload_attachments",
    "validate_attachment",
]
