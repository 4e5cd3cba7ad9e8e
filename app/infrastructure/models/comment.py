"""SQLAlchemy model for administrator comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._columns import generate_uuid, uuid_column_type


class CommentModel(Base):
    """Database representation of a review comment."""

    __tablename__ = "comment"

    id = Column(uuid_column_type(), primary_key=True, default=generate_uuid)
    request_id = Column(
        uuid_column_type(),
        ForeignKey("project_request.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    admin_id = Column(
        uuid_column_type(),
        ForeignKey("identity.id", ondelete="CASCADE"),
        nullable=False,
    )
    comment = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["CommentModel"]
