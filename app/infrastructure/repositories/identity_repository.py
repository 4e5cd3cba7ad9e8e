"""Persistence layer for identity data."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Identity
from app.infrastructure.models import IdentityModel
from app.utils import ensure_app_timezone


class IdentityRepository:
    """Provide access to the credentials of registered identities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, identity_id: str) -> Identity | None:
        model = self.session.get(IdentityModel, identity_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> Identity | None:
        model = (
            self.session.query(IdentityModel)
            .filter(func.lower(IdentityModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, identity: Identity, *, commit: bool = True) -> Identity:
        model = IdentityModel(
            email=identity.email.strip().lower(),
            password=identity.password,
            session_version=identity.session_version,
        )
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def bump_session_version(self, identity_id: str) -> int:
        model = self.session.get(IdentityModel, identity_id)
        if model is None:
            msg = f"Identity with id {identity_id} not found"
            raise ValueError(msg)
        model.session_version = (model.session_version or 0) + 1
        self.session.add(model)
        self.session.commit()
        return model.session_version

    @staticmethod
    def _to_entity(model: IdentityModel) -> Identity:
        return Identity(
            id=model.id,
            email=model.email,
            password=model.password,
            session_version=model.session_version or 0,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["IdentityRepository"]
