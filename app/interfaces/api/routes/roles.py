"""Routes exposing role assignments."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.roles import list_role_assignments
from app.domain.entities import AuthContext
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_auth_context, require_admin_context
from app.interfaces.api.schemas import RoleAssignmentRead

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("/me", response_model=list[RoleAssignmentRead])
def read_own_roles(
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> list[RoleAssignmentRead]:
    assignments = list_role_assignments(db, context, only_own=True)
    return [RoleAssignmentRead.model_validate(item) for item in assignments]


@router.get("/", response_model=list[RoleAssignmentRead])
def list_roles(
    db: Session = Depends(get_db),
    context: AuthContext = Depends(require_admin_context),
) -> list[RoleAssignmentRead]:
    """Return every role assignment; administrators only."""

    assignments = list_role_assignments(db, context)
    return [RoleAssignmentRead.model_validate(item) for item in assignments]
