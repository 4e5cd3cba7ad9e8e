"""Tests for signup, token and sign-out endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from app.config import get_settings
from tests.helpers import DEFAULT_PASSWORD, signup_and_login


def test_signup_creates_profile_and_user_role(client):
    headers = signup_and_login(client, "Alice@Example.com", full_name="Alice Analyst")

    profile = client.get("/profiles/me", headers=headers)
    assert profile.status_code == 200
    assert profile.json()["full_name"] == "Alice Analyst"
    assert profile.json()["email"] == "alice@example.com"

    roles = client.get("/roles/me", headers=headers)
    assert [item["role"] for item in roles.json()] == ["user"]


def test_signup_defaults_full_name_to_email(client):
    headers = signup_and_login(client, "bob@example.com")
    assert client.get("/profiles/me", headers=headers).json()["full_name"] == "bob@example.com"


def test_duplicate_signup_is_rejected(client):
    signup_and_login(client, "dup@example.com")
    response = client.post(
        "/auth/signup", json={"email": "dup@example.com", "password": DEFAULT_PASSWORD}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Email is already registered"


def test_admin_signup_grants_admin_role(client):
    signup_and_login(client, "admin@example.com", admin=True)
    token = client.post(
        "/auth/token", data={"username": "admin@example.com", "password": DEFAULT_PASSWORD}
    )
    assert token.json()["roles"] == ["admin"]


def test_admin_signup_ignored_when_disabled(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "admin_signup_enabled", False)
    headers = signup_and_login(client, "sneaky@example.com", admin=True)
    roles = client.get("/roles/me", headers=headers).json()
    assert [item["role"] for item in roles] == ["user"]


def test_token_rejects_wrong_password(client):
    signup_and_login(client, "carol@example.com")
    response = client.post(
        "/auth/token", data={"username": "carol@example.com", "password": "wrong-pass"}
    )
    assert response.status_code == 401


def test_requests_without_token_are_unauthorized(client):
    assert client.get("/requests/").status_code == 401
    bad = client.get("/requests/", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401


def test_signout_revokes_existing_tokens(client):
    headers = signup_and_login(client, "dave@example.com")
    assert client.get("/profiles/me", headers=headers).status_code == 200

    assert client.post("/auth/signout", headers=headers).status_code == 204
    assert client.get("/profiles/me", headers=headers).status_code == 401

    token = client.post(
        "/auth/token", data={"username": "dave@example.com", "password": DEFAULT_PASSWORD}
    ).json()["access_token"]
    renewed = {"Authorization": f"Bearer {token}"}
    assert client.get("/profiles/me", headers=renewed).status_code == 200


def test_profile_listing_requires_admin(client):
    user_headers = signup_and_login(client, "erin@example.com")
    admin_headers = signup_and_login(client, "root@example.com", admin=True)

    assert client.get("/profiles/", headers=user_headers).status_code == 403
    emails = {item["email"] for item in client.get("/profiles/", headers=admin_headers).json()}
    assert emails == {"erin@example.com", "root@example.com"}


def test_update_own_profile(client):
    headers = signup_and_login(client, "frank@example.com")
    response = client.put("/profiles/me", json={"full_name": "Frank F."}, headers=headers)
    assert response.status_code == 200
    assert response.json()["full_name"] == "Frank F."

    again = client.post("/profiles/me", json={"full_name": "Other"}, headers=headers)
    assert again.status_code == 409
