"""Use cases for authenticating identities and resolving their context."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext, Identity
from app.domain.errors import AuthorizationDeniedError
from app.infrastructure.repositories import IdentityRepository, RoleAssignmentRepository
from app.infrastructure.security import decode_access_token, verify_password


class InvalidCredentialsError(ValueError):
    """The token or the email/password pair could not be validated."""


def authenticate(session: Session, email: str, password: str) -> Identity:
    """Return the identity matching the credentials or raise an error."""

    identity = IdentityRepository(session).get_by_email(email)
    if identity is None or not verify_password(password, identity.password):
        raise InvalidCredentialsError("Incorrect email or password")
    return identity


def resolve_auth_context(session: Session, token: str) -> AuthContext:
    """Build the :class:`AuthContext` for a bearer token.

    Tokens issued before the last sign-out are rejected. An identity without
    any role assignment may not perform authorized actions.
    """

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise InvalidCredentialsError("Invalid credentials") from exc

    identity_id = payload.get("sub")
    version = payload.get("ver")
    if not isinstance(identity_id, str) or not isinstance(version, int):
        raise InvalidCredentialsError("Invalid credentials")

    identity = IdentityRepository(session).get(identity_id)
    if identity is None or identity.session_version != version:
        raise InvalidCredentialsError("Invalid credentials")

    roles = RoleAssignmentRepository(session).roles_for(identity.id)
    if not roles:
        raise AuthorizationDeniedError("No role assigned to this identity")

    return AuthContext(identity_id=identity.id, roles=roles, email=identity.email)


__all__ = ["InvalidCredentialsError", "authenticate", "resolve_auth_context"]
