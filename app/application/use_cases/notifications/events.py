"""Notifications produced as side effects of review activity."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Comment, Notification
from app.infrastructure.repositories import (
    NotificationRepository,
    ProfileRepository,
    ProjectRequestRepository,
)

logger = logging.getLogger(__name__)

UNKNOWN_ADMIN_NAME = "Unknown"
UNTITLED_REQUEST = "Untitled request"


def build_comment_message(admin_name: str | None, request_title: str | None) -> str:
    name = (admin_name or "").strip() or UNKNOWN_ADMIN_NAME
    title = (request_title or "").strip() or UNTITLED_REQUEST
    return f'Admin {name} commented on your request: "{title}"'


def notify_request_owner_of_comment(session: Session, *, comment: Comment) -> Notification | None:
    """Queue the owner's notification for ``comment`` in the current transaction.

    Runs with privileged repository access: the commenting admin has no
    write access to notifications of their own. Nothing is committed here;
    the caller commits the comment and the notification together. Failed
    lookups degrade to default labels instead of aborting the comment.
    """

    owner_id: str | None = None
    title: str | None = None
    requests = ProjectRequestRepository(session)
    try:
        owner_id = requests.get_owner_id(comment.request_id)
        request = requests.get(comment.request_id) if owner_id else None
        title = request.title if request else None
    except SQLAlchemyError:
        logger.warning("Owner lookup failed for request %s", comment.request_id, exc_info=True)

    if owner_id is None:
        logger.warning(
            "Comment %s left without notification: request %s has no owner",
            comment.id,
            comment.request_id,
        )
        return None

    admin_name: str | None = None
    try:
        profile = ProfileRepository(session).get_by_user_id(comment.admin_id)
        admin_name = profile.full_name if profile else None
    except SQLAlchemyError:
        logger.warning("Name lookup failed for admin %s", comment.admin_id, exc_info=True)

    return NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=owner_id,
            request_id=comment.request_id,
            comment_id=comment.id,
            message=build_comment_message(admin_name, title),
            is_read=False,
        ),
        commit=False,
    )


__all__ = ["build_comment_message", "notify_request_owner_of_comment"]
