"""Integration tests for the project request endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from tests.helpers import signup_and_login

PAYLOAD = {
    "title": "Phishing kit tracker",
    "project_types": ["threat-intelligence", "prototype"],
    "problem_statement": "Kits are reused across campaigns.",
    "expected_outcomes": "Weekly kit fingerprint report.",
    "strategic_alignment": "Supports the takedown programme.",
    "estimated_duration": "3 months",
    "key_dependencies": "Passive DNS feed",
    "confidentiality_level": "restricted",
}


@pytest.fixture()
def owner(client):
    return signup_and_login(client, "owner@example.com", full_name="Olivia Owner")


@pytest.fixture()
def admin(client):
    return signup_and_login(client, "admin@example.com", full_name="Ada Admin", admin=True)


def _create(client, headers, **overrides):
    response = client.post("/requests/", json={**PAYLOAD, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_created_request_round_trips_fields(client, owner):
    created = _create(client, owner)

    assert created["status"] == "pending"
    fetched = client.get(f"/requests/{created['id']}", headers=owner).json()
    assert fetched["project_types"] == ["threat-intelligence", "prototype"]
    assert fetched["confidentiality_level"] == "restricted"
    assert fetched["submitter_name"] == "Olivia Owner"
    assert fetched["submitter_email"] == "owner@example.com"


def test_default_confidentiality_is_internal(client, owner):
    payload = {key: value for key, value in PAYLOAD.items() if key != "confidentiality_level"}
    response = client.post("/requests/", json=payload, headers=owner)
    assert response.json()["confidentiality_level"] == "internal"


@pytest.mark.parametrize(
    ("field", "value"),
    [("confidentiality_level", "secret"), ("project_types", []), ("title", "")],
)
def test_invalid_payloads_are_rejected(client, owner, field, value):
    response = client.post("/requests/", json={**PAYLOAD, field: value}, headers=owner)
    assert response.status_code == 422


def test_unknown_project_type_is_rejected(client, owner):
    response = client.post(
        "/requests/", json={**PAYLOAD, "project_types": ["astrology"]}, headers=owner
    )
    assert response.status_code == 400


def test_non_admin_never_sees_other_requests(client, owner):
    created = _create(client, owner)
    intruder = signup_and_login(client, "intruder@example.com")

    assert client.get("/requests/", headers=intruder).json() == []
    assert client.get(f"/requests/{created['id']}", headers=intruder).status_code == 404
    assert client.get("/requests/stats", headers=intruder).json()["total"] == 0


def test_admin_sees_every_request(client, owner, admin):
    _create(client, owner)
    _create(client, admin, title="Admin's own idea")

    titles = {item["title"] for item in client.get("/requests/", headers=admin).json()}
    assert titles == {"Phishing kit tracker", "Admin's own idea"}


def test_owner_edit_locked_once_in_review(client, owner, admin):
    created = _create(client, owner)
    request_url = f"/requests/{created['id']}"

    edited = client.put(request_url, json={"title": "Renamed"}, headers=owner)
    assert edited.status_code == 200
    assert edited.json()["title"] == "Renamed"

    moved = client.patch(f"{request_url}/status", json={"status": "in_review"}, headers=admin)
    assert moved.status_code == 200
    assert moved.json()["status"] == "in_review"

    denied = client.put(request_url, json={"title": "Too late"}, headers=owner)
    assert denied.status_code == 403
    assert client.get(request_url, headers=owner).json()["title"] == "Renamed"


def test_owner_cannot_change_status(client, owner):
    created = _create(client, owner)
    response = client.patch(
        f"/requests/{created['id']}/status", json={"status": "approved"}, headers=owner
    )
    assert response.status_code == 403

    via_put = client.put(
        f"/requests/{created['id']}", json={"status": "approved"}, headers=owner
    )
    assert via_put.status_code == 403


def test_admin_sets_any_status_in_any_order(client, owner, admin):
    created = _create(client, owner)
    url = f"/requests/{created['id']}/status"
    for status in ("approved", "pending", "rejected", "in_review"):
        response = client.patch(url, json={"status": status}, headers=admin)
        assert response.json()["status"] == status

    bad = client.patch(url, json={"status": "archived"}, headers=admin)
    assert bad.status_code == 422


def test_update_rejects_unknown_fields(client, owner):
    created = _create(client, owner)
    response = client.put(
        f"/requests/{created['id']}", json={"user_id": "someone-else"}, headers=owner
    )
    assert response.status_code == 422


def test_search_and_status_filter(client, owner, admin):
    first = _create(client, owner, title="Sandbox escape study")
    _create(client, owner, title="Awareness training refresh", project_types=["training"])
    client.patch(f"/requests/{first['id']}/status", json={"status": "approved"}, headers=admin)

    by_title = client.get("/requests/", params={"search": "SANDBOX"}, headers=admin).json()
    assert [item["title"] for item in by_title] == ["Sandbox escape study"]

    by_submitter = client.get("/requests/", params={"search": "olivia"}, headers=admin).json()
    assert len(by_submitter) == 2

    approved = client.get("/requests/", params={"status": "approved"}, headers=admin).json()
    assert [item["id"] for item in approved] == [first["id"]]

    stats = client.get("/requests/stats", headers=admin).json()
    assert stats == {"total": 2, "pending": 1, "in_review": 0, "approved": 1, "rejected": 0}


def test_owner_deletes_pending_request_only(client, owner, admin):
    kept = _create(client, owner)
    removed = _create(client, owner, title="Withdrawn")

    assert client.delete(f"/requests/{removed['id']}", headers=owner).status_code == 204
    assert client.get(f"/requests/{removed['id']}", headers=owner).status_code == 404

    client.patch(f"/requests/{kept['id']}/status", json={"status": "rejected"}, headers=admin)
    assert client.delete(f"/requests/{kept['id']}", headers=owner).status_code == 403
    assert client.delete(f"/requests/{kept['id']}", headers=admin).status_code == 403
