"""SQLAlchemy model for authenticated identities."""

from sqlalchemy import Column, DateTime, Integer, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._columns import generate_uuid, uuid_column_type


class IdentityModel(Base):
    """Credentials handled by the identity provider."""

    __tablename__ = "identity"

    id = Column(uuid_column_type(), primary_key=True, default=generate_uuid)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    session_version = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["IdentityModel"]
