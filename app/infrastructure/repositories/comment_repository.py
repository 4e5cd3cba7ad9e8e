"""Persistence layer for request comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext, Comment
from app.infrastructure.models import CommentModel, ProfileModel, ProjectRequestModel
from app.utils import ensure_app_timezone

from ._row_filters import visible_requests

DEFAULT_AUTHOR_NAME = "Admin"


class CommentRepository:
    """Provide CRUD operations for :class:`Comment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_request(self, context: AuthContext, request_id: str) -> Sequence[Comment]:
        """Return comments on ``request_id`` oldest first, with author names."""

        query = (
            self._base_query()
            .filter(CommentModel.request_id == request_id)
            .filter(visible_requests(context))
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        return [self._row_to_entity(row) for row in query.all()]

    def get_visible(self, context: AuthContext, comment_id: str) -> Comment | None:
        row = (
            self._base_query()
            .filter(CommentModel.id == comment_id)
            .filter(visible_requests(context))
            .first()
        )
        return self._row_to_entity(row) if row else None

    def create(self, comment: Comment, *, commit: bool = True) -> Comment:
        model = CommentModel(
            request_id=comment.request_id,
            admin_id=comment.admin_id,
            comment=comment.comment,
        )
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def update(self, comment: Comment) -> Comment:
        model = self.session.get(CommentModel, comment.id)
        if model is None:
            msg = f"Comment with id {comment.id} not found"
            raise ValueError(msg)
        # Only the body is editable; author, request and timestamp are fixed.
        model.comment = comment.comment
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, comment_id: str) -> None:
        model = self.session.get(CommentModel, comment_id)
        if model is None:
            msg = f"Comment with id {comment_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _base_query(self):
        return (
            self.session.query(CommentModel, ProfileModel.full_name)
            .join(ProjectRequestModel, ProjectRequestModel.id == CommentModel.request_id)
            .outerjoin(ProfileModel, ProfileModel.user_id == CommentModel.admin_id)
        )

    @classmethod
    def _row_to_entity(cls, row) -> Comment:
        model, full_name = row
        entity = cls._to_entity(model)
        entity.author_name = full_name or DEFAULT_AUTHOR_NAME
        return entity

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            request_id=model.request_id,
            admin_id=model.admin_id,
            comment=model.comment,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["CommentRepository", "DEFAULT_AUTHOR_NAME"]
