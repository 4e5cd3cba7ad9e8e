"""Endpoints for the caller's notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_notification_read as mark_notification_read_uc,
    mark_notifications_read as mark_notifications_read_uc,
)
from app.domain.entities import AuthContext
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_auth_context
from app.interfaces.api.routes_helpers import HANDLED_ERRORS, to_http_exception
from app.interfaces.api.schemas import (
    NotificationMarkRead,
    NotificationMarkReadResponse,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = False,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> list[NotificationRead]:
    """Return the most recent notifications for the caller."""

    notifications = list_notifications_uc(db, context, unread_only=unread_only, limit=limit)
    return [NotificationRead.model_validate(item) for item in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def read_unread_count(
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> UnreadCountRead:
    return UnreadCountRead(unread=count_unread_notifications(db, context))


@router.post("/read", response_model=NotificationMarkReadResponse)
def mark_notifications_read(
    payload: NotificationMarkRead,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> NotificationMarkReadResponse:
    updated = mark_notifications_read_uc(db, context, payload.notification_ids)
    return NotificationMarkReadResponse(updated=updated)


@router.post("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> NotificationRead:
    try:
        notification = mark_notification_read_uc(db, context, notification_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return NotificationRead.model_validate(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> Response:
    try:
        delete_notification_uc(db, context, notification_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
