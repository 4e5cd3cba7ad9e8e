"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._columns import generate_uuid, uuid_column_type


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(uuid_column_type(), primary_key=True, default=generate_uuid)
    user_id = Column(
        uuid_column_type(),
        ForeignKey("identity.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    request_id = Column(
        uuid_column_type(),
        ForeignKey("project_request.id", ondelete="CASCADE"),
        nullable=False,
    )
    comment_id = Column(
        uuid_column_type(),
        ForeignKey("comment.id", ondelete="CASCADE"),
        nullable=True,
    )
    message = Column(Text, nullable=False)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
