"""Use cases for editing project requests and changing their status."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import (
    CONTENT_FIELDS,
    AuthContext,
    ConfidentialityLevel,
    ProjectRequest,
    RequestStatus,
)
from app.domain.policies import can_update_request, require
from app.infrastructure.repositories import ProjectRequestRepository

from .get_request import get_project_request
from .validators import ensure_required_text, normalize_project_types, optional_text

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = frozenset(CONTENT_FIELDS) | {"status"}


def update_project_request(
    session: Session,
    context: AuthContext,
    request_id: str,
    changes: Mapping[str, Any],
) -> ProjectRequest:
    """Apply ``changes`` to a request the caller can see.

    Owners may edit content only while the request is pending; a change
    including ``status`` requires the admin role.
    """

    unknown = set(changes) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields cannot be modified: {', '.join(sorted(unknown))}")

    current = get_project_request(session, context, request_id)
    require(
        can_update_request(context, current, changes_status="status" in changes),
        "Only pending requests can be edited by their owner",
    )

    values: dict[str, Any] = {}
    for field_name, value in changes.items():
        if field_name in ("title", "problem_statement", "expected_outcomes"):
            values[field_name] = ensure_required_text(field_name, value)
        elif field_name == "project_types":
            values[field_name] = normalize_project_types(value or [])
        elif field_name == "confidentiality_level":
            values[field_name] = ConfidentialityLevel(value)
        elif field_name == "status":
            values[field_name] = RequestStatus(value)
        else:
            values[field_name] = optional_text(value)

    updated = ProjectRequestRepository(session).update(replace(current, **values))
    if "status" in values and values["status"] is not current.status:
        logger.info(
            "Request %s moved from %s to %s by %s",
            request_id,
            current.status.value,
            updated.status.value,
            context.identity_id,
        )
    return get_project_request(session, context, request_id)


def update_request_status(
    session: Session,
    context: AuthContext,
    request_id: str,
    status: RequestStatus,
) -> ProjectRequest:
    """Set any of the four statuses; there is no enforced transition order."""

    return update_project_request(session, context, request_id, {"status": status})
