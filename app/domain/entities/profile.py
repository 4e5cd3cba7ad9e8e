"""Domain entity representing a user profile."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Profile:
    """Public details of an identity, created once at signup."""

    id: str | None
    user_id: str
    full_name: str
    email: str
    created_at: datetime | None = None


__all__ = ["Profile"]
