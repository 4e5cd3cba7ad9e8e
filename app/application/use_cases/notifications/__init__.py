"""Public helpers for emitting and reading notifications."""

from .events import build_comment_message, notify_request_owner_of_comment
from .inbox import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_notification_read,
    mark_notifications_read,
)

__all__ = [
    "build_comment_message",
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_notification_read",
    "mark_notifications_read",
    "notify_request_owner_of_comment",
]
