"""Domain entity representing an authenticated identity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Identity:
    """Credentials record owned by the identity provider."""

    id: str | None
    email: str
    password: str
    session_version: int
    created_at: datetime | None


__all__ = ["Identity"]
