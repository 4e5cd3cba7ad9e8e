"""Use case for adding an administrator comment to a request."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_request_owner_of_comment
from app.application.use_cases.requests.get_request import get_project_request
from app.domain.entities import AuthContext, Comment
from app.domain.policies import can_create_comment, require
from app.infrastructure.repositories import CommentRepository

logger = logging.getLogger(__name__)


def create_comment(
    session: Session, context: AuthContext, request_id: str, *, body: str
) -> Comment:
    """Insert the comment and the owner's notification in one transaction."""

    require(can_create_comment(context, context.identity_id), "Only admins can comment")
    cleaned = (body or "").strip()
    if not cleaned:
        raise ValueError("Comment cannot be empty")

    request = get_project_request(session, context, request_id)

    try:
        comment = CommentRepository(session).create(
            Comment(
                id=None,
                request_id=request.id,
                admin_id=context.identity_id,
                comment=cleaned,
            ),
            commit=False,
        )
        notification = notify_request_owner_of_comment(session, comment=comment)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    if notification is not None:
        logger.info("Notified %s about comment %s", notification.user_id, comment.id)
    return CommentRepository(session).get_visible(context, comment.id) or comment
