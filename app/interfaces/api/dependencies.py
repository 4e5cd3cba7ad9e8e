"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.application.use_cases.identities import InvalidCredentialsError, resolve_auth_context
from app.domain.entities import AuthContext
from app.domain.errors import AuthorizationDeniedError
from app.infrastructure.database import get_db

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_auth_context(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> AuthContext:
    """Return the caller's :class:`AuthContext` for the bearer token."""

    try:
        return resolve_auth_context(db, token)
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    except AuthorizationDeniedError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc


def require_admin_context(context: AuthContext = Depends(get_auth_context)) -> AuthContext:
    """Ensure the caller holds the admin role."""

    if not context.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return context
