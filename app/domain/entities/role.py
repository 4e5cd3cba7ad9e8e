"""Domain entities describing roles and role assignments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AppRole(str, Enum):
    """Closed set of roles an identity can hold."""

    USER = "user"
    ADMIN = "admin"


@dataclass
class RoleAssignment:
    """Grant of ``role`` to the identity ``user_id``."""

    id: str | None
    user_id: str
    role: AppRole
    created_at: datetime | None = None


__all__ = ["AppRole", "RoleAssignment"]
