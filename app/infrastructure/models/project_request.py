"""SQLAlchemy model for project requests."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Text

from app.domain.entities import ConfidentialityLevel, RequestStatus
from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._columns import enum_column_type, generate_uuid, uuid_column_type


class ProjectRequestModel(Base):
    """Database representation of a submitted project proposal."""

    __tablename__ = "project_request"

    id = Column(uuid_column_type(), primary_key=True, default=generate_uuid)
    user_id = Column(
        uuid_column_type(),
        ForeignKey("identity.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(Text, nullable=False)
    project_types = Column(JSON, nullable=False, default=list)
    strategic_alignment = Column(Text, nullable=True)
    problem_statement = Column(Text, nullable=False)
    expected_outcomes = Column(Text, nullable=False)
    estimated_duration = Column(Text, nullable=True)
    key_dependencies = Column(Text, nullable=True)
    confidentiality_level = Column(
        enum_column_type(ConfidentialityLevel, "confidentiality_level"),
        nullable=False,
        default=ConfidentialityLevel.INTERNAL,
    )
    status = Column(
        enum_column_type(RequestStatus, "request_status"),
        nullable=False,
        default=RequestStatus.PENDING,
        index=True,
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["ProjectRequestModel"]
