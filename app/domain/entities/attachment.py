"""Domain entity describing a file attached to a project request."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Attachment:
    """Metadata for a stored object bound to a request and its uploader."""

    id: str | None
    request_id: str
    user_id: str
    file_name: str
    file_path: str
    file_size: int
    file_type: str
    created_at: datetime | None = None


__all__ = ["Attachment"]
