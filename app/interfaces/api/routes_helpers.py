"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.domain.errors import (
    AttachmentValidationError,
    AuthorizationDeniedError,
    NotFoundError,
    StorageError,
)


def to_http_exception(exc: Exception) -> HTTPException:
    """Translate an application error into the matching HTTP error."""

    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, AuthorizationDeniedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, AttachmentValidationError) and exc.too_large:
        return HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(exc)
        )
    if isinstance(exc, StorageError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="File storage is unavailable",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


# Errors a use case raises for caller mistakes; anything else propagates as 500.
HANDLED_ERRORS = (ValueError, AuthorizationDeniedError, StorageError)
