"""Row-level authorization predicates.

Each predicate answers whether the caller described by an
:class:`~app.domain.entities.AuthContext` may perform one operation on one
row. Reads are enforced as query filters by the repositories; the
predicates below are evaluated by the use cases before any write.
"""

from __future__ import annotations

from app.domain.entities import (
    Attachment,
    AuthContext,
    Comment,
    Notification,
    Profile,
    ProjectRequest,
    RoleAssignment,
)
from app.domain.errors import AuthorizationDeniedError


def require(allowed: bool, message: str = "Not authorized") -> None:
    """Raise :class:`AuthorizationDeniedError` unless ``allowed``."""

    if not allowed:
        raise AuthorizationDeniedError(message)


# ---- Profiles ----

def can_read_profile(context: AuthContext, profile: Profile) -> bool:
    return profile.user_id == context.identity_id or context.is_admin()


def can_create_profile(context: AuthContext, identity_id: str) -> bool:
    return identity_id == context.identity_id


def can_update_profile(context: AuthContext, profile: Profile) -> bool:
    return profile.user_id == context.identity_id


# ---- Role assignments ----

def can_read_role_assignment(context: AuthContext, assignment: RoleAssignment) -> bool:
    return assignment.user_id == context.identity_id or context.is_admin()


# ---- Project requests ----

def can_read_request(context: AuthContext, request: ProjectRequest) -> bool:
    return request.user_id == context.identity_id or context.is_admin()


def can_create_request(context: AuthContext, owner_id: str) -> bool:
    return owner_id == context.identity_id


def can_update_request(
    context: AuthContext, request: ProjectRequest, *, changes_status: bool = False
) -> bool:
    """Owners edit content while pending; only admins touch the status."""

    if context.is_admin():
        return True
    if changes_status:
        return False
    return request.user_id == context.identity_id and request.is_pending


def can_delete_request(context: AuthContext, request: ProjectRequest) -> bool:
    return request.user_id == context.identity_id and request.is_pending


# ---- Comments ----

def can_read_comment(context: AuthContext, request_owner_id: str | None) -> bool:
    return context.is_admin() or (
        request_owner_id is not None and request_owner_id == context.identity_id
    )


def can_create_comment(context: AuthContext, admin_id: str) -> bool:
    return context.is_admin() and admin_id == context.identity_id


def can_modify_comment(context: AuthContext, comment: Comment) -> bool:
    return context.is_admin() and comment.admin_id == context.identity_id


# ---- Notifications ----

def can_access_notification(context: AuthContext, notification: Notification) -> bool:
    return notification.user_id == context.identity_id


# ---- Attachments ----

def can_read_attachment(context: AuthContext, request_owner_id: str | None) -> bool:
    return can_read_comment(context, request_owner_id)


def can_create_attachment(
    context: AuthContext, request: ProjectRequest, uploader_id: str
) -> bool:
    return (
        uploader_id == context.identity_id
        and request.user_id == context.identity_id
        and request.is_pending
    )


def can_delete_attachment(
    context: AuthContext, attachment: Attachment, request: ProjectRequest
) -> bool:
    return attachment.user_id == context.identity_id and request.is_pending


def can_write_object(context: AuthContext, object_path: str) -> bool:
    """Object keys are writable only under the caller's own first segment."""

    first_segment = object_path.split("/", 1)[0]
    return bool(first_segment) and first_segment == context.identity_id


__all__ = [
    "can_access_notification",
    "can_create_attachment",
    "can_create_comment",
    "can_create_profile",
    "can_create_request",
    "can_delete_attachment",
    "can_delete_request",
    "can_modify_comment",
    "can_read_attachment",
    "can_read_comment",
    "can_read_profile",
    "can_read_request",
    "can_read_role_assignment",
    "can_update_profile",
    "can_update_request",
    "can_write_object",
    "require",
]
