"""Column helpers shared by the ORM models."""

from __future__ import annotations

from enum import Enum as PyEnum
from uuid import uuid4

from sqlalchemy import Enum, String


def generate_uuid() -> str:
    return str(uuid4())


def uuid_column_type() -> String:
    return String(36)


def enum_column_type(enum_cls: type[PyEnum], name: str) -> Enum:
    """Store enum values (not member names) and reject anything outside the set."""

    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
        create_constraint=True,
    )
