"""Use case ending every session of the caller."""

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext
from app.infrastructure.repositories import IdentityRepository


def signout(session: Session, context: AuthContext) -> None:
    """Revoke all tokens issued to the caller so far."""

    IdentityRepository(session).bump_session_version(context.identity_id)
