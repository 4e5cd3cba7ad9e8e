"""Domain entity representing an administrator comment."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    """Free-text review note written by an administrator on a request."""

    id: str | None
    request_id: str
    admin_id: str
    comment: str
    created_at: datetime | None = None
    author_name: str | None = None


__all__ = ["Comment"]
