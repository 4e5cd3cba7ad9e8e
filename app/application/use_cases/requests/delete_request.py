"""Use case for withdrawing a pending project request."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import AuthContext
from app.domain.policies import can_delete_request, require
from app.infrastructure.repositories import AttachmentRepository, ProjectRequestRepository
from app.infrastructure.storage import delete_blob

from .get_request import get_project_request

logger = logging.getLogger(__name__)


def delete_project_request(session: Session, context: AuthContext, request_id: str) -> None:
    """Delete the request, its dependent rows and its stored attachment objects.

    Row deletion is flushed first and committed only once every stored object
    is gone. If removal stops part way, the request is kept and the
    attachment rows of the objects already removed are deleted.
    """

    request = get_project_request(session, context, request_id)
    require(
        can_delete_request(context, request),
        "Only the owner can delete a request, and only while it is pending",
    )

    paths = AttachmentRepository(session).list_paths_for_request(request_id)
    removed: list[str] = []
    try:
        ProjectRequestRepository(session).delete(request_id, commit=False)
        for path in paths:
            delete_blob(path)
            removed.append(path)
        session.commit()
    except Exception:
        session.rollback()
        if removed:
            _forget_removed_objects(session, request_id, removed)
        raise

    logger.info("Request %s deleted with %d attachment(s)", request_id, len(paths))


def _forget_removed_objects(session: Session, request_id: str, removed: list[str]) -> None:
    try:
        count = AttachmentRepository(session).delete_by_paths(removed)
    except SQLAlchemyError:
        session.rollback()
        logger.error(
            "Request %s kept with rows for removed objects: %s",
            request_id,
            ", ".join(removed),
        )
        return
    logger.warning(
        "Request %s kept after partial storage cleanup; dropped %d attachment row(s)",
        request_id,
        count,
    )
