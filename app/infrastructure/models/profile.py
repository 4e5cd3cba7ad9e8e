"""SQLAlchemy model for user profiles."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._columns import generate_uuid, uuid_column_type


class ProfileModel(Base):
    """Database representation of the profile created at signup."""

    __tablename__ = "profile"

    id = Column(uuid_column_type(), primary_key=True, default=generate_uuid)
    user_id = Column(
        uuid_column_type(),
        ForeignKey("identity.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    full_name = Column(Text, nullable=False)
    email = Column(String(255), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ProfileModel"]
