"""Use cases for reading role assignments."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext, RoleAssignment
from app.domain.policies import can_read_role_assignment
from app.infrastructure.repositories import RoleAssignmentRepository


def list_role_assignments(
    session: Session, context: AuthContext, *, only_own: bool = False
) -> Sequence[RoleAssignment]:
    """Return assignments visible to the caller, optionally only their own."""

    assignments = [
        item
        for item in RoleAssignmentRepository(session).list_visible(context)
        if can_read_role_assignment(context, item)
    ]
    if only_own:
        return [item for item in assignments if item.user_id == context.identity_id]
    return assignments
