"""SQLAlchemy model for request attachments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._columns import generate_uuid, uuid_column_type


class AttachmentModel(Base):
    """Metadata row pointing at an object in the attachments container."""

    __tablename__ = "request_attachment"

    id = Column(uuid_column_type(), primary_key=True, default=generate_uuid)
    request_id = Column(
        uuid_column_type(),
        ForeignKey("project_request.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        uuid_column_type(),
        ForeignKey("identity.id", ondelete="CASCADE"),
        nullable=False,
    )
    file_name = Column(Text, nullable=False)
    file_path = Column(String(512), nullable=False)
    file_size = Column(Integer, nullable=False)
    file_type = Column(String(255), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["AttachmentModel"]
