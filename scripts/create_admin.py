"""Utility script to provision an administrator identity."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.identities import signup
from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import RoleAssignmentRepository
from app.domain.entities import AppRole, RoleAssignment


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create an administrator for the project request portal.",
    )
    parser.add_argument("--email", default="admin@example.com", help="Administrator email")
    parser.add_argument("--full-name", default="Administrator", help="Display name")
    parser.add_argument(
        "--password",
        default=None,
        help="Password. Prompted for interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create the administrator from the command line arguments."""

    args = parse_args()

    password = args.password or getpass("Administrator password: ")
    if len(password) < 8:
        raise SystemExit("The password must have at least 8 characters.")

    initialize_database()

    session = SessionLocal()
    try:
        result = signup(
            session,
            email=args.email,
            password=password,
            full_name=args.full_name,
            is_admin_signup=True,
        )
        if result.role.role is not AppRole.ADMIN:
            # Admin signup is disabled for the API; grant the role directly.
            RoleAssignmentRepository(session).create(
                RoleAssignment(id=None, user_id=result.identity.id, role=AppRole.ADMIN)
            )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the administrator: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the administrator: {exc}") from exc
    else:
        print(
            "Administrator created:\n"
            f"  ID: {result.identity.id}\n"
            f"  Name: {result.profile.full_name}\n"
            f"  Email: {result.identity.email}\n"
            f"  Admin signup via API: {'on' if get_settings().admin_signup_enabled else 'off'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
