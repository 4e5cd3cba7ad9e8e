"""Persistence layer for role assignments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AppRole, AuthContext, RoleAssignment
from app.infrastructure.models import RoleAssignmentModel
from app.utils import ensure_app_timezone

from ._row_filters import owner_or_admin


class RoleAssignmentRepository:
    """Provide read access to role assignments and the signup-time insert."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def has_role(self, user_id: str, role: AppRole) -> bool:
        """Return ``True`` iff an assignment row exists for the pair."""

        query = self.session.query(RoleAssignmentModel.id).filter(
            RoleAssignmentModel.user_id == user_id,
            RoleAssignmentModel.role == role,
        )
        return self.session.query(query.exists()).scalar()

    def roles_for(self, user_id: str) -> frozenset[AppRole]:
        rows = (
            self.session.query(RoleAssignmentModel.role)
            .filter(RoleAssignmentModel.user_id == user_id)
            .all()
        )
        return frozenset(AppRole(role) for (role,) in rows)

    def list_visible(self, context: AuthContext) -> Sequence[RoleAssignment]:
        query = (
            self.session.query(RoleAssignmentModel)
            .filter(owner_or_admin(context, RoleAssignmentModel.user_id))
            .order_by(RoleAssignmentModel.created_at.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, assignment: RoleAssignment, *, commit: bool = True) -> RoleAssignment:
        model = RoleAssignmentModel(user_id=assignment.user_id, role=assignment.role)
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RoleAssignmentModel) -> RoleAssignment:
        return RoleAssignment(
            id=model.id,
            user_id=model.user_id,
            role=AppRole(model.role),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["RoleAssignmentRepository"]
