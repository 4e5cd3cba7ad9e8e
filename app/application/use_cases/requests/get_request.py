"""Use cases for reading project requests."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext, ProjectRequest, RequestStats, RequestStatus
from app.domain.errors import NotFoundError
from app.domain.policies import can_read_request
from app.infrastructure.repositories import ProjectRequestRepository


def get_project_request(
    session: Session, context: AuthContext, request_id: str
) -> ProjectRequest:
    """Return the request or raise :class:`NotFoundError`.

    A request the caller may not read is reported exactly like a missing one.
    """

    request = ProjectRequestRepository(session).get_visible(context, request_id)
    if request is None or not can_read_request(context, request):
        raise NotFoundError("Request not found")
    return request


def list_project_requests(
    session: Session,
    context: AuthContext,
    *,
    status: RequestStatus | None = None,
    search: str | None = None,
    skip: int = 0,
    limit: int | None = 100,
) -> Sequence[ProjectRequest]:
    """Return visible requests, newest first, filtered by status and search term."""

    return ProjectRequestRepository(session).list_visible(
        context, status=status, search=search, skip=skip, limit=limit
    )


def get_request_stats(session: Session, context: AuthContext) -> RequestStats:
    return ProjectRequestRepository(session).count_by_status(context)
