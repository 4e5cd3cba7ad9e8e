"""Use cases for reading and editing profiles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext, Profile
from app.domain.errors import NotFoundError
from app.domain.policies import (
    can_create_profile,
    can_read_profile,
    can_update_profile,
    require,
)
from app.infrastructure.repositories import ProfileRepository


def get_profile(session: Session, context: AuthContext, user_id: str) -> Profile:
    """Return the profile of ``user_id`` if the caller may see it."""

    profile = ProfileRepository(session).get_visible(context, user_id)
    if profile is None or not can_read_profile(context, profile):
        raise NotFoundError("Profile not found")
    return profile


def list_profiles(
    session: Session, context: AuthContext, *, skip: int = 0, limit: int | None = 100
) -> Sequence[Profile]:
    return ProfileRepository(session).list_visible(context, skip=skip, limit=limit)


def create_own_profile(
    session: Session, context: AuthContext, *, full_name: str | None = None
) -> Profile:
    """Create the caller's profile when signup did not leave one behind."""

    require(can_create_profile(context, context.identity_id))
    repository = ProfileRepository(session)
    if repository.get_by_user_id(context.identity_id) is not None:
        raise ValueError("Profile already exists")
    email = context.email or ""
    return repository.create(
        Profile(
            id=None,
            user_id=context.identity_id,
            full_name=(full_name or "").strip() or email,
            email=email,
        )
    )


def update_own_profile(session: Session, context: AuthContext, *, full_name: str) -> Profile:
    repository = ProfileRepository(session)
    profile = repository.get_by_user_id(context.identity_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    require(can_update_profile(context, profile))

    cleaned = full_name.strip()
    if not cleaned:
        raise ValueError("Full name is required")
    return repository.update(replace(profile, full_name=cleaned))


__all__ = [
    "create_own_profile",
    "get_profile",
    "list_profiles",
    "update_own_profile",
]
