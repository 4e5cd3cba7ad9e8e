"""Persistence helpers for request attachments."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Attachment, AuthContext
from app.infrastructure.models import AttachmentModel, ProjectRequestModel
from app.utils import ensure_app_timezone

from ._row_filters import visible_requests


class AttachmentRepository:
    """Provide CRUD operations for attachment metadata rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_request(self, context: AuthContext, request_id: str) -> list[Attachment]:
        query = (
            self._visible_query(context)
            .filter(AttachmentModel.request_id == request_id)
            .order_by(AttachmentModel.created_at.asc(), AttachmentModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get_visible(self, context: AuthContext, attachment_id: str) -> Attachment | None:
        model = (
            self._visible_query(context)
            .filter(AttachmentModel.id == attachment_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def list_paths_for_request(self, request_id: str) -> list[str]:
        rows = (
            self.session.query(AttachmentModel.file_path)
            .filter(AttachmentModel.request_id == request_id)
            .all()
        )
        return [path for (path,) in rows]

    def delete_by_paths(self, file_paths: list[str], *, commit: bool = True) -> int:
        """Delete the rows recorded for ``file_paths``; returns the row count."""

        if not file_paths:
            return 0
        deleted = (
            self.session.query(AttachmentModel)
            .filter(AttachmentModel.file_path.in_(file_paths))
            .delete(synchronize_session=False)
        )
        if commit:
            self.session.commit()
        return deleted

    def create(self, attachment: Attachment) -> Attachment:
        model = AttachmentModel(
            request_id=attachment.request_id,
            user_id=attachment.user_id,
            file_name=attachment.file_name,
            file_path=attachment.file_path,
            file_size=attachment.file_size,
            file_type=attachment.file_type,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, attachment_id: str, *, commit: bool = True) -> None:
        model = self.session.get(AttachmentModel, attachment_id)
        if model is None:
            msg = f"Attachment with id {attachment_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()

    def _visible_query(self, context: AuthContext):
        return (
            self.session.query(AttachmentModel)
            .join(ProjectRequestModel, ProjectRequestModel.id == AttachmentModel.request_id)
            .filter(visible_requests(context))
        )

    @staticmethod
    def _to_entity(model: AttachmentModel) -> Attachment:
        return Attachment(
            id=model.id,
            request_id=model.request_id,
            user_id=model.user_id,
            file_name=model.file_name,
            file_path=model.file_path,
            file_size=model.file_size,
            file_type=model.file_type,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["AttachmentRepository"]
