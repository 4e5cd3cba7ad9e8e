"""Notification schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NotificationRead(BaseModel):
    id: str
    user_id: str
    request_id: str
    comment_id: str | None
    message: str
    is_read: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class NotificationMarkRead(BaseModel):
    notification_ids: list[str] = Field(..., min_length=1)

    @field_validator("notification_ids")
    @classmethod
    def _unique_ids(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))


class NotificationMarkReadResponse(BaseModel):
    updated: int


class UnreadCountRead(BaseModel):
    unread: int


__all__ = [
    "NotificationMarkRead",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "UnreadCountRead",
]
