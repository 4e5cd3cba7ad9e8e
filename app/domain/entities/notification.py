"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """Message delivered to the owner of a request after an admin comment."""

    id: str | None
    user_id: str
    request_id: str
    comment_id: str | None
    message: str
    is_read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification"]
