"""Domain entity representing a submitted project request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class RequestStatus(str, Enum):
    """Lifecycle states of a project request."""

    PENDING = "pending"
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class ConfidentialityLevel(str, Enum):
    """Sensitivity declared by the submitter."""

    PUBLIC = "public"
    INTERNAL = "internal"
    RESTRICTED = "restricted"


PROJECT_TYPES: dict[str, str] = {
    "research": "Research",
    "threat-intelligence": "Threat Intelligence",
    "prototype": "Prototype / Tool",
    "advisory": "Advisory",
    "training": "Training",
    "other": "Other",
}

# Fields the owner may edit while the request is pending.
CONTENT_FIELDS: tuple[str, ...] = (
    "title",
    "project_types",
    "strategic_alignment",
    "problem_statement",
    "expected_outcomes",
    "estimated_duration",
    "key_dependencies",
    "confidentiality_level",
)


@dataclass
class ProjectRequest:
    """A project proposal owned by exactly one identity."""

    id: str | None
    user_id: str
    title: str
    project_types: list[str]
    problem_statement: str
    expected_outcomes: str
    strategic_alignment: str | None = None
    estimated_duration: str | None = None
    key_dependencies: str | None = None
    confidentiality_level: ConfidentialityLevel = ConfidentialityLevel.INTERNAL
    status: RequestStatus = RequestStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None
    submitter_name: str | None = None
    submitter_email: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is RequestStatus.PENDING


@dataclass
class RequestStats:
    """Per-status counters over the requests visible to a caller."""

    total: int = 0
    by_status: dict[RequestStatus, int] = field(
        default_factory=lambda: {status: 0 for status in RequestStatus}
    )


__all__ = [
    "CONTENT_FIELDS",
    "ConfidentialityLevel",
    "PROJECT_TYPES",
    "ProjectRequest",
    "RequestStats",
    "RequestStatus",
]
