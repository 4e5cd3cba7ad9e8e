"""Use case for submitting a project request."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import (
    AuthContext,
    ConfidentialityLevel,
    ProjectRequest,
    RequestStatus,
)
from app.domain.policies import can_create_request, require
from app.infrastructure.repositories import ProjectRequestRepository

from .validators import ensure_required_text, normalize_project_types, optional_text

logger = logging.getLogger(__name__)


def create_project_request(
    session: Session,
    context: AuthContext,
    *,
    title: str,
    project_types: list[str],
    problem_statement: str,
    expected_outcomes: str,
    strategic_alignment: str | None = None,
    estimated_duration: str | None = None,
    key_dependencies: str | None = None,
    confidentiality_level: ConfidentialityLevel = ConfidentialityLevel.INTERNAL,
) -> ProjectRequest:
    """Create a pending request owned by the caller."""

    require(can_create_request(context, context.identity_id))

    request = ProjectRequest(
        id=None,
        user_id=context.identity_id,
        title=ensure_required_text("title", title),
        project_types=normalize_project_types(project_types),
        problem_statement=ensure_required_text("problem_statement", problem_statement),
        expected_outcomes=ensure_required_text("expected_outcomes", expected_outcomes),
        strategic_alignment=optional_text(strategic_alignment),
        estimated_duration=optional_text(estimated_duration),
        key_dependencies=optional_text(key_dependencies),
        confidentiality_level=ConfidentialityLevel(confidentiality_level),
        status=RequestStatus.PENDING,
    )
    created = ProjectRequestRepository(session).create(request)
    logger.info("Request %s submitted by %s", created.id, context.identity_id)
    return created
