"""Exceptions raised by the application and mapped to HTTP responses."""

from __future__ import annotations


class AuthorizationDeniedError(PermissionError):
    """The caller is not allowed to perform the requested operation."""


class NotFoundError(ValueError):
    """The row does not exist or is not visible to the caller."""


class AttachmentValidationError(ValueError):
    """An uploaded file does not satisfy the size or type constraints."""

    def __init__(self, message: str, *, too_large: bool = False) -> None:
        super().__init__(message)
        self.too_large = too_large


class StorageError(RuntimeError):
    """The object store rejected or failed an operation."""


__all__ = [
    "AttachmentValidationError",
    "AuthorizationDeniedError",
    "NotFoundError",
    "StorageError",
]
