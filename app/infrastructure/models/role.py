"""SQLAlchemy model for role assignments."""

from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint

from app.domain.entities import AppRole
from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._columns import enum_column_type, generate_uuid, uuid_column_type


class RoleAssignmentModel(Base):
    """Pair of identity and role, kept apart from the editable profile."""

    __tablename__ = "user_role"
    __table_args__ = (UniqueConstraint("user_id", "role", name="uq_user_role_user_id_role"),)

    id = Column(uuid_column_type(), primary_key=True, default=generate_uuid)
    user_id = Column(
        uuid_column_type(),
        ForeignKey("identity.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role = Column(enum_column_type(AppRole, "app_role"), nullable=False, default=AppRole.USER)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["RoleAssignmentModel"]
