"""Use cases letting a recipient read, acknowledge and dismiss notifications."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AuthContext, Notification
from app.domain.errors import NotFoundError
from app.domain.policies import can_access_notification, require
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    context: AuthContext,
    *,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[Notification]:
    return NotificationRepository(session).list_for_user(
        context.identity_id, unread_only=unread_only, limit=limit
    )


def count_unread_notifications(session: Session, context: AuthContext) -> int:
    return NotificationRepository(session).count_unread(context.identity_id)


def _get_own_notification(
    session: Session, context: AuthContext, notification_id: str
) -> Notification:
    notification = NotificationRepository(session).get_for_user(
        notification_id, user_id=context.identity_id
    )
    if notification is None:
        raise NotFoundError("Notification not found")
    require(can_access_notification(context, notification))
    return notification


def mark_notification_read(
    session: Session, context: AuthContext, notification_id: str
) -> Notification:
    notification = _get_own_notification(session, context, notification_id)
    NotificationRepository(session).mark_as_read([notification.id], user_id=context.identity_id)
    notification.is_read = True
    return notification


def mark_notifications_read(
    session: Session, context: AuthContext, notification_ids: Iterable[str]
) -> int:
    """Mark the caller's notifications among ``notification_ids`` as read.

    Identifiers belonging to other recipients are ignored.
    """

    return NotificationRepository(session).mark_as_read(
        notification_ids, user_id=context.identity_id
    )


def delete_notification(session: Session, context: AuthContext, notification_id: str) -> None:
    _get_own_notification(session, context, notification_id)
    NotificationRepository(session).delete(notification_id, user_id=context.identity_id)


__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_notification_read",
    "mark_notifications_read",
]
