"""Persistence layer for project requests."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.domain.entities import (
    AuthContext,
    ConfidentialityLevel,
    ProjectRequest,
    RequestStats,
    RequestStatus,
)
from app.infrastructure.models import ProfileModel, ProjectRequestModel
from app.utils import ensure_app_timezone, now_in_app_naive_datetime

from ._row_filters import visible_requests

UNKNOWN_SUBMITTER = "Unknown"


class ProjectRequestRepository:
    """Provide CRUD operations for :class:`ProjectRequest` objects.

    Reads taking an :class:`AuthContext` only ever return rows visible to that
    caller. Methods without a context are privileged lookups used by internal
    side effects and policy checks.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_owner_id(self, request_id: str) -> str | None:
        row = (
            self.session.query(ProjectRequestModel.user_id)
            .filter(ProjectRequestModel.id == request_id)
            .first()
        )
        return row[0] if row else None

    def get(self, request_id: str) -> ProjectRequest | None:
        model = self.session.get(ProjectRequestModel, request_id)
        return self._to_entity(model) if model else None

    def get_visible(self, context: AuthContext, request_id: str) -> ProjectRequest | None:
        row = (
            self._base_query()
            .filter(ProjectRequestModel.id == request_id)
            .filter(visible_requests(context))
            .first()
        )
        return self._row_to_entity(row) if row else None

    def list_visible(
        self,
        context: AuthContext,
        *,
        status: RequestStatus | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> Sequence[ProjectRequest]:
        query = self._base_query().filter(visible_requests(context))
        if status is not None:
            query = query.filter(ProjectRequestModel.status == status)
        term = (search or "").strip().lower()
        if term:
            query = query.filter(
                or_(
                    func.lower(ProjectRequestModel.title).contains(term),
                    func.lower(ProfileModel.full_name).contains(term),
                    func.lower(ProfileModel.email).contains(term),
                )
            )
        query = query.order_by(
            ProjectRequestModel.created_at.desc(), ProjectRequestModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._row_to_entity(row) for row in query.all()]

    def count_by_status(self, context: AuthContext) -> RequestStats:
        rows = (
            self.session.query(ProjectRequestModel.status, func.count(ProjectRequestModel.id))
            .filter(visible_requests(context))
            .group_by(ProjectRequestModel.status)
            .all()
        )
        stats = RequestStats()
        for status, count in rows:
            stats.by_status[RequestStatus(status)] = count
            stats.total += count
        return stats

    def create(self, request: ProjectRequest) -> ProjectRequest:
        model = ProjectRequestModel(user_id=request.user_id)
        self._apply_entity_to_model(model, request)
        model.status = request.status
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, request: ProjectRequest) -> ProjectRequest:
        model = self.session.get(ProjectRequestModel, request.id)
        if model is None:
            msg = f"Project request with id {request.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, request)
        model.status = request.status
        model.updated_at = now_in_app_naive_datetime()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, request_id: str, *, commit: bool = True) -> None:
        model = self.session.get(ProjectRequestModel, request_id)
        if model is None:
            msg = f"Project request with id {request_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()

    def _base_query(self):
        return self.session.query(
            ProjectRequestModel, ProfileModel.full_name, ProfileModel.email
        ).outerjoin(ProfileModel, ProfileModel.user_id == ProjectRequestModel.user_id)

    @staticmethod
    def _apply_entity_to_model(model: ProjectRequestModel, request: ProjectRequest) -> None:
        # user_id is set once on insert and never copied back.
        model.title = request.title
        model.project_types = list(request.project_types)
        model.strategic_alignment = request.strategic_alignment
        model.problem_statement = request.problem_statement
        model.expected_outcomes = request.expected_outcomes
        model.estimated_duration = request.estimated_duration
        model.key_dependencies = request.key_dependencies
        model.confidentiality_level = request.confidentiality_level

    @classmethod
    def _row_to_entity(cls, row) -> ProjectRequest:
        model, full_name, email = row
        entity = cls._to_entity(model)
        entity.submitter_name = full_name or UNKNOWN_SUBMITTER
        entity.submitter_email = email or ""
        return entity

    @staticmethod
    def _to_entity(model: ProjectRequestModel) -> ProjectRequest:
        return ProjectRequest(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            project_types=list(model.project_types or []),
            strategic_alignment=model.strategic_alignment,
            problem_statement=model.problem_statement,
            expected_outcomes=model.expected_outcomes,
            estimated_duration=model.estimated_duration,
            key_dependencies=model.key_dependencies,
            confidentiality_level=ConfidentialityLevel(model.confidentiality_level),
            status=RequestStatus(model.status),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ProjectRequestRepository", "UNKNOWN_SUBMITTER"]
