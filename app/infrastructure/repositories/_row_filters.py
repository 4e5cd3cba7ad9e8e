"""Query filters applying row-level visibility for an authenticated context."""

from __future__ import annotations

from sqlalchemy import ColumnElement, true

from app.domain.entities import AuthContext
from app.infrastructure.models import ProjectRequestModel


def owner_or_admin(context: AuthContext, owner_column) -> ColumnElement[bool]:
    """Admins see every row; everyone else only rows where they are the owner."""

    if context.is_admin():
        return true()
    return owner_column == context.identity_id


def visible_requests(context: AuthContext) -> ColumnElement[bool]:
    return owner_or_admin(context, ProjectRequestModel.user_id)


__all__ = ["owner_or_admin", "visible_requests"]
