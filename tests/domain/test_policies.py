"""Tests for the row-level authorization predicates."""

import pytest

from app.domain.entities import (
    AppRole,
    Attachment,
    AuthContext,
    Comment,
    Notification,
    ProjectRequest,
    RequestStatus,
)
from app.domain.errors import AuthorizationDeniedError
from app.domain import policies

OWNER = AuthContext(identity_id="owner", roles=frozenset({AppRole.USER}))
STRANGER = AuthContext(identity_id="stranger", roles=frozenset({AppRole.USER}))
ADMIN = AuthContext(identity_id="admin", roles=frozenset({AppRole.ADMIN}))


def _request(status: RequestStatus = RequestStatus.PENDING) -> ProjectRequest:
    return ProjectRequest(
        id="req-1",
        user_id="owner",
        title="Title",
        project_types=["research"],
        problem_statement="Problem",
        expected_outcomes="Outcome",
        status=status,
    )


def test_require_raises_on_denial():
    policies.require(True)
    with pytest.raises(AuthorizationDeniedError, match="Nope"):
        policies.require(False, "Nope")


@pytest.mark.parametrize(
    ("context", "expected"),
    [(OWNER, True), (STRANGER, False), (ADMIN, True)],
)
def test_request_read_visibility(context, expected):
    assert policies.can_read_request(context, _request()) is expected


def test_request_creation_only_for_self():
    assert policies.can_create_request(OWNER, "owner")
    assert not policies.can_create_request(OWNER, "stranger")


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (RequestStatus.PENDING, True),
        (RequestStatus.IN_REVIEW, False),
        (RequestStatus.APPROVED, False),
        (RequestStatus.REJECTED, False),
    ],
)
def test_owner_content_edit_locked_after_pending(status, expected):
    assert policies.can_update_request(OWNER, _request(status)) is expected
    assert policies.can_delete_request(OWNER, _request(status)) is expected


def test_only_admin_changes_status():
    assert not policies.can_update_request(OWNER, _request(), changes_status=True)
    assert policies.can_update_request(
        ADMIN, _request(RequestStatus.APPROVED), changes_status=True
    )
    assert not policies.can_update_request(STRANGER, _request())


def test_comment_rules():
    comment = Comment(id="c1", request_id="req-1", admin_id="admin", comment="Looks good")
    other_admin = AuthContext(identity_id="admin-2", roles=frozenset({AppRole.ADMIN}))

    assert policies.can_read_comment(OWNER, "owner")
    assert not policies.can_read_comment(STRANGER, "owner")
    assert policies.can_read_comment(ADMIN, None)
    assert policies.can_create_comment(ADMIN, "admin")
    assert not policies.can_create_comment(ADMIN, "admin-2")
    assert not policies.can_create_comment(OWNER, "owner")
    assert policies.can_modify_comment(ADMIN, comment)
    assert not policies.can_modify_comment(other_admin, comment)


def test_notifications_belong_to_recipient_only():
    notification = Notification(
        id="n1", user_id="owner", request_id="req-1", comment_id="c1", message="hi"
    )
    assert policies.can_access_notification(OWNER, notification)
    assert not policies.can_access_notification(ADMIN, notification)


def test_attachment_rules():
    attachment = Attachment(
        id="a1",
        request_id="req-1",
        user_id="owner",
        file_name="brief.pdf",
        file_path="owner/req-1/x.pdf",
        file_size=10,
        file_type="application/pdf",
    )
    assert policies.can_create_attachment(OWNER, _request(), "owner")
    assert not policies.can_create_attachment(OWNER, _request(), "stranger")
    assert not policies.can_create_attachment(ADMIN, _request(), "admin")
    assert not policies.can_create_attachment(OWNER, _request(RequestStatus.IN_REVIEW), "owner")
    assert policies.can_delete_attachment(OWNER, attachment, _request())
    assert not policies.can_delete_attachment(ADMIN, attachment, _request())
    assert policies.can_read_attachment(ADMIN, "owner")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("owner/req-1/file.pdf", True),
        ("stranger/req-1/file.pdf", False),
        ("/owner/file.pdf", False),
        ("", False),
    ],
)
def test_object_writes_confined_to_own_prefix(path, expected):
    assert policies.can_write_object(OWNER, path) is expected
