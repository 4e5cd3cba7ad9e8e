"""Tests for the multipart attachment and submission endpoints."""

from __future__ import annotations

import json

import pytest

pytest.importorskip("fastapi")

from tests.helpers import signup_and_login

REQUEST_FIELDS = {
    "title": "Insider risk model",
    "project_types": ["research"],
    "problem_statement": "Alerts are noisy.",
    "expected_outcomes": "A ranked alert queue.",
}


def _pdf(name: str, size: int = 16):
    return ("files", (name, b"%" * size, "application/pdf"))


def test_submit_with_files_returns_created(client, blob_store):
    headers = signup_and_login(client, "owner@example.com")
    response = client.post(
        "/requests/submit",
        data={"request": json.dumps(REQUEST_FIELDS)},
        files=[_pdf("a.pdf"), _pdf("b.pdf")],
        headers=headers,
    )

    assert response.status_code == 201, response.text
    body = response.json()
    assert body["request"]["status"] == "pending"
    assert body["attachments"]["summary"] == "2 of 2 files uploaded"
    assert len(blob_store.objects) == 2


def test_submit_keeps_request_when_some_uploads_fail(client):
    headers = signup_and_login(client, "owner@example.com")
    response = client.post(
        "/requests/submit",
        data={"request": json.dumps(REQUEST_FIELDS)},
        files=[_pdf("ok.pdf"), ("files", ("tool.exe", b"MZ", "application/x-msdownload"))],
        headers=headers,
    )

    assert response.status_code == 207
    body = response.json()
    assert body["attachments"]["summary"] == "1 of 2 files uploaded"
    assert body["attachments"]["failures"][0]["file_name"] == "tool.exe"
    listed = client.get("/requests/", headers=headers).json()
    assert [item["id"] for item in listed] == [body["request"]["id"]]


def test_submit_rejects_malformed_request_json(client):
    headers = signup_and_login(client, "owner@example.com")
    response = client.post(
        "/requests/submit",
        data={"request": json.dumps({**REQUEST_FIELDS, "confidentiality_level": "top"})},
        headers=headers,
    )
    assert response.status_code == 422
    assert client.get("/requests/", headers=headers).json() == []


def test_upload_list_download_and_delete(client, blob_store):
    owner = signup_and_login(client, "owner@example.com")
    admin = signup_and_login(client, "admin@example.com", admin=True)
    request_id = client.post("/requests/", json=REQUEST_FIELDS, headers=owner).json()["id"]

    uploaded = client.post(
        f"/requests/{request_id}/attachments", files=[_pdf("scope.pdf")], headers=owner
    )
    assert uploaded.status_code == 201
    attachment_id = uploaded.json()["uploaded"][0]["id"]

    listed = client.get(f"/requests/{request_id}/attachments", headers=admin).json()
    assert [item["file_name"] for item in listed] == ["scope.pdf"]

    link = client.get(f"/attachments/{attachment_id}/download-url", headers=admin).json()
    assert link["expires_in"] == 60
    assert link["url"].startswith("https://storage.test/")

    assert client.delete(f"/attachments/{attachment_id}", headers=admin).status_code == 403
    assert client.delete(f"/attachments/{attachment_id}", headers=owner).status_code == 204
    assert blob_store.objects == {}


def test_admin_cannot_upload_to_user_request(client, blob_store):
    owner = signup_and_login(client, "owner@example.com")
    admin = signup_and_login(client, "admin@example.com", admin=True)
    request_id = client.post("/requests/", json=REQUEST_FIELDS, headers=owner).json()["id"]

    response = client.post(
        f"/requests/{request_id}/attachments", files=[_pdf("x.pdf")], headers=admin
    )
    assert response.status_code == 403
    assert blob_store.upload_calls == []


def test_storage_outage_on_request_delete_returns_bad_gateway(client, blob_store):
    owner = signup_and_login(client, "owner@example.com")
    request_id = client.post("/requests/", json=REQUEST_FIELDS, headers=owner).json()["id"]
    client.post(f"/requests/{request_id}/attachments", files=[_pdf("x.pdf")], headers=owner)
    blob_store.fail_deletes = True

    assert client.delete(f"/requests/{request_id}", headers=owner).status_code == 502
    assert client.get(f"/requests/{request_id}", headers=owner).status_code == 200
