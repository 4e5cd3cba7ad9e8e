"""Helpers building identities and requests for tests."""

from __future__ import annotations

from app.application.use_cases.identities import resolve_auth_context, signup
from app.application.use_cases.requests import create_project_request
from app.domain.entities import AuthContext, ProjectRequest
from app.infrastructure.security import create_access_token

DEFAULT_PASSWORD = "s3cret-pass"


def make_context(session, email: str, *, full_name: str | None = None, admin: bool = False) -> AuthContext:
    result = signup(
        session,
        email=email,
        password=DEFAULT_PASSWORD,
        full_name=full_name,
        is_admin_signup=admin,
    )
    token = create_access_token(
        identity_id=result.identity.id,
        session_version=result.identity.session_version,
    )
    return resolve_auth_context(session, token)


def make_request(session, context: AuthContext, **overrides) -> ProjectRequest:
    fields = {
        "title": "Malware triage pipeline",
        "project_types": ["research", "prototype"],
        "problem_statement": "Manual triage takes too long.",
        "expected_outcomes": "An automated first pass.",
    }
    fields.update(overrides)
    return create_project_request(session, context, **fields)


def signup_and_login(client, email: str, *, full_name: str | None = None, admin: bool = False) -> dict[str, str]:
    """Sign up through the API and return bearer headers."""

    response = client.post(
        "/auth/signup",
        json={
            "email": email,
            "password": DEFAULT_PASSWORD,
            "full_name": full_name,
            "is_admin_signup": admin,
        },
    )
    assert response.status_code == 201, response.text
    token_response = client.post(
        "/auth/token",
        data={"username": email, "password": DEFAULT_PASSWORD},
    )
    assert token_response.status_code == 200, token_response.text
    token = token_response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
