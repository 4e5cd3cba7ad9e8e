"""Authenticated caller context threaded through every data access."""

from __future__ import annotations

from dataclasses import dataclass, field

from .role import AppRole


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller and the roles assigned to it."""

    identity_id: str
    roles: frozenset[AppRole] = field(default_factory=frozenset)
    email: str | None = None

    def has_role(self, role: AppRole) -> bool:
        return role in self.roles

    def is_admin(self) -> bool:
        return self.has_role(AppRole.ADMIN)


__all__ = ["AuthContext"]
