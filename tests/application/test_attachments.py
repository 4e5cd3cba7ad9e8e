"""Tests for attachment upload, download and removal."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.application.use_cases.attachments import (
    UploadedFile,
    delete_attachment,
    get_attachment,
    get_attachment_download,
    list_attachments,
    upload_attachment,
    upload_attachments,
)
from app.application.use_cases.requests import (
    delete_project_request,
    get_project_request,
    update_request_status,
)
from app.domain.entities import RequestStatus
from app.domain.errors import (
    AttachmentValidationError,
    AuthorizationDeniedError,
    NotFoundError,
    StorageError,
)
from app.infrastructure.repositories import AttachmentRepository
from tests.helpers import make_context, make_request

MAX_BYTES = 10 * 1024 * 1024


def _pdf(size: int, name: str = "brief.pdf") -> UploadedFile:
    return UploadedFile(file_name=name, content_type="application/pdf", data=b"x" * size)


@pytest.fixture()
def owner(session):
    return make_context(session, "owner@example.com", full_name="Olivia Owner")


@pytest.fixture()
def admin(session):
    return make_context(session, "admin@example.com", full_name="Ada Admin", admin=True)


@pytest.fixture()
def request_row(session, owner):
    return make_request(session, owner)


def test_upload_at_size_ceiling_is_accepted(session, owner, request_row, blob_store):
    attachment = upload_attachment(session, owner, request_row.id, _pdf(MAX_BYTES))

    assert attachment.file_size == MAX_BYTES
    assert attachment.file_type == "application/pdf"
    assert attachment.file_path.startswith(f"{owner.identity_id}/{request_row.id}/")
    assert attachment.file_path.endswith(".pdf")
    assert blob_store.objects[attachment.file_path] == b"x" * MAX_BYTES


def test_upload_over_ceiling_rejected_before_storage(session, owner, request_row, blob_store):
    with pytest.raises(AttachmentValidationError) as excinfo:
        upload_attachment(session, owner, request_row.id, _pdf(MAX_BYTES + 1))

    assert excinfo.value.too_large is True
    assert "10.0 MB" in str(excinfo.value)
    assert blob_store.upload_calls == []


def test_disallowed_type_never_reaches_storage(session, owner, request_row, blob_store):
    upload = UploadedFile(
        file_name="payload.exe", content_type="application/x-msdownload", data=b"MZ"
    )
    with pytest.raises(AttachmentValidationError):
        upload_attachment(session, owner, request_row.id, upload)
    assert blob_store.upload_calls == []


def test_metadata_failure_removes_stored_object(
    session, owner, request_row, blob_store, monkeypatch
):
    def _fail(self, attachment):
        raise OperationalError("INSERT INTO request_attachment", {}, Exception("disk full"))

    monkeypatch.setattr(AttachmentRepository, "create", _fail)

    with pytest.raises(OperationalError):
        upload_attachment(session, owner, request_row.id, _pdf(128))

    assert len(blob_store.upload_calls) == 1
    assert blob_store.objects == {}
    assert blob_store.deleted == blob_store.upload_calls


def test_empty_file_is_accepted(session, owner, request_row, blob_store):
    attachment = upload_attachment(session, owner, request_row.id, _pdf(0))

    assert attachment.file_size == 0
    assert blob_store.objects[attachment.file_path] == b""


def test_unexpected_error_after_store_removes_object(
    session, owner, request_row, blob_store, monkeypatch
):
    def _fail(self, attachment):
        raise RuntimeError("row mapping failed")

    monkeypatch.setattr(AttachmentRepository, "create", _fail)

    with pytest.raises(RuntimeError):
        upload_attachment(session, owner, request_row.id, _pdf(64))

    assert blob_store.objects == {}
    assert blob_store.deleted == blob_store.upload_calls


def test_batch_upload_reports_partial_failure(session, owner, request_row, blob_store):
    report = upload_attachments(
        session,
        owner,
        request_row.id,
        [
            _pdf(10, "one.pdf"),
            UploadedFile(file_name="notes.txt", content_type="text/plain", data=b"notes"),
            _pdf(MAX_BYTES + 1, "huge.pdf"),
        ],
    )

    assert report.summary == "2 of 3 files uploaded"
    assert [failure.file_name for failure in report.failures] == ["huge.pdf"]
    assert len(list_attachments(session, owner, request_row.id)) == 2


def test_storage_failure_is_reported_per_file(session, owner, request_row, blob_store):
    blob_store.fail_uploads = True
    report = upload_attachments(session, owner, request_row.id, [_pdf(10)])

    assert report.summary == "0 of 1 files uploaded"
    assert AttachmentRepository(session).list_paths_for_request(request_row.id) == []


def test_only_owner_uploads_while_pending(session, owner, admin, request_row, blob_store):
    with pytest.raises(AuthorizationDeniedError):
        upload_attachment(session, admin, request_row.id, _pdf(10))

    stranger = make_context(session, "stranger@example.com")
    with pytest.raises(NotFoundError):
        upload_attachment(session, stranger, request_row.id, _pdf(10))

    update_request_status(session, admin, request_row.id, RequestStatus.IN_REVIEW)
    with pytest.raises(AuthorizationDeniedError):
        upload_attachment(session, owner, request_row.id, _pdf(10))
    assert blob_store.upload_calls == []


def test_download_link_is_signed_and_visibility_scoped(session, owner, admin, request_row):
    attachment = upload_attachment(session, owner, request_row.id, _pdf(10))

    download = get_attachment_download(session, admin, attachment.id)
    assert download.expires_in == 60
    assert download.file_name == "brief.pdf"
    assert attachment.file_path in download.url

    stranger = make_context(session, "stranger@example.com")
    with pytest.raises(NotFoundError):
        get_attachment_download(session, stranger, attachment.id)


def test_delete_attachment_removes_object_and_row(session, owner, request_row, blob_store):
    attachment = upload_attachment(session, owner, request_row.id, _pdf(10))

    delete_attachment(session, owner, attachment.id)

    assert blob_store.objects == {}
    assert list_attachments(session, owner, request_row.id) == []


def test_failed_object_removal_keeps_attachment_row(session, owner, request_row, blob_store):
    attachment = upload_attachment(session, owner, request_row.id, _pdf(10))
    blob_store.fail_deletes = True

    with pytest.raises(StorageError):
        delete_attachment(session, owner, attachment.id)

    assert [item.id for item in list_attachments(session, owner, request_row.id)] == [
        attachment.id
    ]


def test_request_deletion_clears_attachments(session, owner, request_row, blob_store):
    upload_attachments(session, owner, request_row.id, [_pdf(10, "a.pdf"), _pdf(20, "b.pdf")])

    delete_project_request(session, owner, request_row.id)

    assert blob_store.objects == {}
    with pytest.raises(NotFoundError):
        get_project_request(session, owner, request_row.id)


def test_request_kept_when_object_removal_fails(session, owner, request_row, blob_store):
    upload_attachment(session, owner, request_row.id, _pdf(10))
    blob_store.fail_deletes = True

    with pytest.raises(StorageError):
        delete_project_request(session, owner, request_row.id)

    assert get_project_request(session, owner, request_row.id).id == request_row.id
    assert len(list_attachments(session, owner, request_row.id)) == 1


def test_partial_request_cleanup_drops_rows_of_removed_objects(
    session, owner, request_row, blob_store
):
    upload_attachments(session, owner, request_row.id, [_pdf(10, "a.pdf"), _pdf(20, "b.pdf")])
    blob_store.fail_deletes_after = 1

    with pytest.raises(StorageError):
        delete_project_request(session, owner, request_row.id)

    assert get_project_request(session, owner, request_row.id).id == request_row.id
    remaining = list_attachments(session, owner, request_row.id)
    assert len(remaining) == 1
    assert [item.file_path for item in remaining] == list(blob_store.objects)
    dangling = [item.file_path for item in remaining if item.file_path not in blob_store.objects]
    assert dangling == []


def test_failed_commit_after_object_removal_drops_row(
    session, owner, request_row, blob_store, monkeypatch
):
    attachment = upload_attachment(session, owner, request_row.id, _pdf(10))
    real_commit = session.commit
    calls = {"count": 0}

    def _commit_failing_once():
        calls["count"] += 1
        if calls["count"] == 1:
            raise OperationalError("COMMIT", {}, Exception("database is locked"))
        real_commit()

    monkeypatch.setattr(session, "commit", _commit_failing_once)

    with pytest.raises(OperationalError):
        delete_attachment(session, owner, attachment.id)

    assert blob_store.objects == {}
    assert list_attachments(session, owner, request_row.id) == []


def test_attachment_hidden_from_other_submitters(session, owner, request_row):
    attachment = upload_attachment(session, owner, request_row.id, _pdf(10))
    stranger = make_context(session, "stranger@example.com")

    with pytest.raises(NotFoundError):
        get_attachment(session, stranger, attachment.id)
    assert get_attachment(session, owner, attachment.id).id == attachment.id
