"""Common validation helpers for project request use cases."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities import PROJECT_TYPES


def normalize_project_types(project_types: Iterable[str]) -> list[str]:
    """Return the known tags in submission order without duplicates."""

    normalized: list[str] = []
    for tag in project_types:
        cleaned = (tag or "").strip().lower()
        if not cleaned or cleaned in normalized:
            continue
        if cleaned not in PROJECT_TYPES:
            raise ValueError(f"Unknown project type: {tag}")
        normalized.append(cleaned)
    if not normalized:
        raise ValueError("Please select at least one project type")
    return normalized


def ensure_required_text(field_name: str, value: str | None) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        label = field_name.replace("_", " ").capitalize()
        raise ValueError(f"{label} is required")
    return cleaned


def optional_text(value: str | None) -> str | None:
    """Blank optional fields are stored as ``None``."""

    cleaned = (value or "").strip()
    return cleaned or None
