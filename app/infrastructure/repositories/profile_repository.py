"""Persistence layer for profile data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext, Profile
from app.infrastructure.models import ProfileModel
from app.utils import ensure_app_timezone

from ._row_filters import owner_or_admin


class ProfileRepository:
    """Provide CRUD operations for :class:`Profile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_user_id(self, user_id: str) -> Profile | None:
        """Privileged lookup that ignores row visibility."""

        model = self._get_model(user_id)
        return self._to_entity(model) if model else None

    def get_visible(self, context: AuthContext, user_id: str) -> Profile | None:
        model = (
            self.session.query(ProfileModel)
            .filter(ProfileModel.user_id == user_id)
            .filter(owner_or_admin(context, ProfileModel.user_id))
            .first()
        )
        return self._to_entity(model) if model else None

    def list_visible(
        self, context: AuthContext, *, skip: int = 0, limit: int | None = 100
    ) -> Sequence[Profile]:
        query = (
            self.session.query(ProfileModel)
            .filter(owner_or_admin(context, ProfileModel.user_id))
            .order_by(ProfileModel.created_at.desc())
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get_map_by_user_ids(self, user_ids: Sequence[str]) -> dict[str, Profile]:
        if not user_ids:
            return {}
        query = self.session.query(ProfileModel).filter(
            ProfileModel.user_id.in_(set(user_ids))
        )
        return {model.user_id: self._to_entity(model) for model in query.all()}

    def create(self, profile: Profile, *, commit: bool = True) -> Profile:
        model = ProfileModel(
            user_id=profile.user_id,
            full_name=profile.full_name,
            email=profile.email,
        )
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def update(self, profile: Profile) -> Profile:
        model = self._get_model(profile.user_id)
        if model is None:
            msg = f"Profile for identity {profile.user_id} not found"
            raise ValueError(msg)
        model.full_name = profile.full_name
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, user_id: str) -> ProfileModel | None:
        return (
            self.session.query(ProfileModel)
            .filter(ProfileModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            user_id=model.user_id,
            full_name=model.full_name,
            email=model.email,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProfileRepository"]
