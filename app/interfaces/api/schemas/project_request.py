"""Schemas for project request endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import ConfidentialityLevel, RequestStatus


class ProjectRequestCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    project_types: list[str] = Field(..., min_length=1)
    problem_statement: str = Field(..., min_length=1)
    expected_outcomes: str = Field(..., min_length=1)
    strategic_alignment: str | None = None
    estimated_duration: str | None = Field(default=None, max_length=100)
    key_dependencies: str | None = None
    confidentiality_level: ConfidentialityLevel = ConfidentialityLevel.INTERNAL

    model_config = ConfigDict(extra="forbid")


class ProjectRequestUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=300)
    project_types: list[str] | None = None
    problem_statement: str | None = Field(default=None, min_length=1)
    expected_outcomes: str | None = Field(default=None, min_length=1)
    strategic_alignment: str | None = None
    estimated_duration: str | None = Field(default=None, max_length=100)
    key_dependencies: str | None = None
    confidentiality_level: ConfidentialityLevel | None = None
    status: RequestStatus | None = None

    model_config = ConfigDict(extra="forbid")


class ProjectRequestStatusUpdate(BaseModel):
    status: RequestStatus


class ProjectRequestRead(BaseModel):
    id: str
    user_id: str
    title: str
    project_types: list[str]
    strategic_alignment: str | None
    problem_statement: str
    expected_outcomes: str
    estimated_duration: str | None
    key_dependencies: str | None
    confidentiality_level: ConfidentialityLevel
    status: RequestStatus
    created_at: datetime | None
    updated_at: datetime | None
    submitter_name: str | None = None
    submitter_email: str | None = None

    model_config = ConfigDict(from_attributes=True)


class RequestStatsRead(BaseModel):
    total: int
    pending: int
    in_review: int
    approved: int
    rejected: int


__all__ = [
    "ProjectRequestCreate",
    "ProjectRequestRead",
    "ProjectRequestStatusUpdate",
    "ProjectRequestUpdate",
    "RequestStatsRead",
]
