"""Use cases listing, downloading and deleting attachments."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.requests.get_request import get_project_request
from app.config import get_settings
from app.domain.entities import Attachment, AuthContext
from app.domain.errors import NotFoundError
from app.domain.policies import can_delete_attachment, can_read_attachment, require
from app.infrastructure.repositories import AttachmentRepository, ProjectRequestRepository
from app.infrastructure.storage import delete_blob, generate_download_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignedDownload:
    url: str
    expires_in: int
    file_name: str


def list_attachments(session: Session, context: AuthContext, request_id: str) -> list[Attachment]:
    """Return the attachments of a visible request, oldest first."""

    get_project_request(session, context, request_id)
    return AttachmentRepository(session).list_for_request(context, request_id)


def get_attachment(session: Session, context: AuthContext, attachment_id: str) -> Attachment:
    attachment = AttachmentRepository(session).get_visible(context, attachment_id)
    if attachment is None:
        raise NotFoundError("Attachment not found")
    owner_id = ProjectRequestRepository(session).get_owner_id(attachment.request_id)
    if not can_read_attachment(context, owner_id):
        raise NotFoundError("Attachment not found")
    return attachment


def get_attachment_download(
    session: Session, context: AuthContext, attachment_id: str
) -> SignedDownload:
    """Return a short-lived signed link instead of a public URL."""

    attachment = get_attachment(session, context, attachment_id)
    expires_in = get_settings().signed_url_expiry_seconds
    url = generate_download_url(attachment.file_path, expires_in=expires_in)
    return SignedDownload(url=url, expires_in=expires_in, file_name=attachment.file_name)


def delete_attachment(session: Session, context: AuthContext, attachment_id: str) -> None:
    """Remove the stored object and its metadata row together.

    The row deletion is flushed, then the object is removed, then the
    transaction commits. A storage failure rolls the row back. If the commit
    fails once the object is gone, the row is deleted again on its own.
    """

    attachment = get_attachment(session, context, attachment_id)
    request = ProjectRequestRepository(session).get(attachment.request_id)
    if request is None:
        raise NotFoundError("Attachment not found")
    require(
        can_delete_attachment(context, attachment, request),
        "Only the uploader can delete an attachment, and only while the request is pending",
    )

    object_removed = False
    try:
        AttachmentRepository(session).delete(attachment_id, commit=False)
        delete_blob(attachment.file_path)
        object_removed = True
        session.commit()
    except Exception:
        session.rollback()
        if object_removed:
            _drop_row_without_object(session, attachment_id, attachment.file_path)
        raise
    logger.info("Attachment %s removed from request %s", attachment_id, request.id)


def _drop_row_without_object(session: Session, attachment_id: str, object_path: str) -> None:
    try:
        AttachmentRepository(session).delete(attachment_id)
    except SQLAlchemyError:
        session.rollback()
        logger.error(
            "Attachment %s still references removed object %s", attachment_id, object_path
        )
        return
    logger.warning("Attachment %s row removed after its object was deleted", attachment_id)


__all__ = [
    "SignedDownload",
    "delete_attachment",
    "get_attachment",
    "get_attachment_download",
    "list_attachments",
]
