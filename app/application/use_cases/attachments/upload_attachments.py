"""Use cases storing uploaded files and recording them against a request."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.requests.get_request import get_project_request
from app.domain.entities import Attachment, AuthContext, ProjectRequest
from app.domain.errors import AuthorizationDeniedError, StorageError
from app.domain.policies import can_create_attachment, can_write_object, require
from app.infrastructure.repositories import AttachmentRepository
from app.infrastructure.storage import delete_blob, upload_blob

from .validators import build_object_path, validate_attachment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """File received from the client."""

    file_name: str
    content_type: str | None
    data: bytes


@dataclass(frozen=True)
class UploadFailure:
    file_name: str
    reason: str


@dataclass
class UploadReport:
    """Per-file outcome of a batch upload."""

    uploaded: list[Attachment] = field(default_factory=list)
    failures: list[UploadFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.uploaded) + len(self.failures)

    @property
    def summary(self) -> str:
        return f"{len(self.uploaded)} of {self.total} files uploaded"


def upload_attachment(
    session: Session,
    context: AuthContext,
    request_id: str,
    upload: UploadedFile,
    *,
    request: ProjectRequest | None = None,
) -> Attachment:
    """Store ``upload`` and record its metadata row.

    Size and type are checked before any storage call. When the metadata
    insert fails after the object was stored, the object is removed before
    the error propagates.
    """

    mime_type = validate_attachment(upload.file_name, len(upload.data), upload.content_type)

    parent = request or get_project_request(session, context, request_id)
    require(
        can_create_attachment(context, parent, context.identity_id),
        "Attachments can only be added by the owner while the request is pending",
    )

    object_path = build_object_path(context.identity_id, parent.id, upload.file_name)
    require(can_write_object(context, object_path))

    upload_blob(object_path, upload.data, content_type=mime_type)
    try:
        return AttachmentRepository(session).create(
            Attachment(
                id=None,
                request_id=parent.id,
                user_id=context.identity_id,
                file_name=upload.file_name,
                file_path=object_path,
                file_size=len(upload.data),
                file_type=mime_type,
            )
        )
    except Exception:
        session.rollback()
        _discard_orphan(object_path)
        raise


def upload_attachments(
    session: Session,
    context: AuthContext,
    request_id: str,
    uploads: Sequence[UploadedFile],
) -> UploadReport:
    """Upload every file independently and report each outcome.

    A failure on one file never undoes the files already recorded. Errors on
    the parent request itself (missing, not visible, not writable) abort the
    whole batch.
    """

    parent = get_project_request(session, context, request_id)
    require(
        can_create_attachment(context, parent, context.identity_id),
        "Attachments can only be added by the owner while the request is pending",
    )

    report = UploadReport()
    for upload in uploads:
        try:
            attachment = upload_attachment(
                session, context, request_id, upload, request=parent
            )
        except (ValueError, StorageError, SQLAlchemyError, AuthorizationDeniedError) as exc:
            logger.warning("Failed to upload %s to request %s: %s", upload.file_name, request_id, exc)
            report.failures.append(UploadFailure(file_name=upload.file_name, reason=str(exc)))
            continue
        report.uploaded.append(attachment)

    logger.info("Request %s: %s", request_id, report.summary)
    return report


def _discard_orphan(object_path: str) -> None:
    try:
        delete_blob(object_path)
    except StorageError:
        logger.error("Could not remove orphaned attachment object %s", object_path)
        return
    logger.warning("Removed attachment object %s after metadata insert failed", object_path)


__all__ = [
    "UploadFailure",
    "UploadReport",
    "UploadedFile",
    "upload_attachment",
    "upload_attachments",
]
