"""Use cases for listing, editing and removing comments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.requests.get_request import get_project_request
from app.domain.entities import AuthContext, Comment
from app.domain.errors import NotFoundError
from app.domain.policies import can_modify_comment, require
from app.infrastructure.repositories import CommentRepository


def list_comments(session: Session, context: AuthContext, request_id: str) -> Sequence[Comment]:
    """Return the comments of a visible request with author names resolved."""

    get_project_request(session, context, request_id)
    return CommentRepository(session).list_for_request(context, request_id)


def _get_comment(session: Session, context: AuthContext, comment_id: str) -> Comment:
    comment = CommentRepository(session).get_visible(context, comment_id)
    if comment is None:
        raise NotFoundError("Comment not found")
    return comment


def update_comment(
    session: Session, context: AuthContext, comment_id: str, *, body: str
) -> Comment:
    comment = _get_comment(session, context, comment_id)
    require(can_modify_comment(context, comment), "Only the authoring admin can edit a comment")
    cleaned = (body or "").strip()
    if not cleaned:
        raise ValueError("Comment cannot be empty")
    updated = CommentRepository(session).update(replace(comment, comment=cleaned))
    updated.author_name = comment.author_name
    return updated


def delete_comment(session: Session, context: AuthContext, comment_id: str) -> None:
    comment = _get_comment(session, context, comment_id)
    require(can_modify_comment(context, comment), "Only the authoring admin can delete a comment")
    CommentRepository(session).delete(comment_id)
