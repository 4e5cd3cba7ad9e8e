"""Use case provisioning a new identity with its profile and role."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import AppRole, Identity, Profile, RoleAssignment
from app.infrastructure.repositories import (
    IdentityRepository,
    ProfileRepository,
    RoleAssignmentRepository,
)
from app.infrastructure.security import get_password_hash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignupResult:
    """Rows written by a successful signup."""

    identity: Identity
    profile: Profile
    role: RoleAssignment


def signup(
    session: Session,
    *,
    email: str,
    password: str,
    full_name: str | None = None,
    is_admin_signup: bool = False,
) -> SignupResult:
    """Create the identity, exactly one profile and exactly one role assignment.

    The three inserts share a transaction: either all rows exist afterwards
    or none do. The admin flag is honoured only while
    ``ADMIN_SIGNUP_ENABLED`` is set.
    """

    identities = IdentityRepository(session)
    normalized_email = email.strip().lower()
    if identities.get_by_email(normalized_email):
        raise ValueError("Email is already registered")

    grant_admin = is_admin_signup and get_settings().admin_signup_enabled
    if is_admin_signup and not grant_admin:
        logger.warning("Admin signup requested for %s while disabled", normalized_email)
    role = AppRole.ADMIN if grant_admin else AppRole.USER

    try:
        identity = identities.create(
            Identity(
                id=None,
                email=normalized_email,
                password=get_password_hash(password),
                session_version=0,
                created_at=None,
            ),
            commit=False,
        )
        profile = ProfileRepository(session).create(
            Profile(
                id=None,
                user_id=identity.id,
                full_name=(full_name or "").strip() or normalized_email,
                email=normalized_email,
            ),
            commit=False,
        )
        assignment = RoleAssignmentRepository(session).create(
            RoleAssignment(id=None, user_id=identity.id, role=role),
            commit=False,
        )
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    logger.info("Provisioned identity %s with role %s", identity.id, role.value)
    return SignupResult(identity=identity, profile=profile, role=assignment)


__all__ = ["SignupResult", "signup"]
