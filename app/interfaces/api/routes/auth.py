"""Endpoints for signup, sign-in and sign-out."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.application.use_cases.identities import (
    InvalidCredentialsError,
    authenticate,
    signout,
    signup,
)
from app.domain.entities import AuthContext
from app.infrastructure.database import get_db
from app.infrastructure.repositories import RoleAssignmentRepository
from app.infrastructure.security import create_access_token
from app.interfaces.api.dependencies import get_auth_context
from app.interfaces.api.schemas import SignupRequest, SignupResponse, Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def register_identity(payload: SignupRequest, db: Session = Depends(get_db)) -> SignupResponse:
    """Create an identity together with its profile and role."""

    try:
        result = signup(
            db,
            email=payload.email,
            password=payload.password,
            full_name=payload.full_name,
            is_admin_signup=payload.is_admin_signup,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return SignupResponse(
        user_id=result.identity.id,
        email=result.identity.email,
        full_name=result.profile.full_name,
        role=result.role.role.value,
    )


# The form keeps the field name ``username``; it carries the email.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> Token:
    """Authenticate by email and password and return a bearer token."""

    try:
        identity = authenticate(db, form_data.username, form_data.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    roles = RoleAssignmentRepository(db).roles_for(identity.id)
    access_token = create_access_token(
        identity_id=identity.id, session_version=identity.session_version
    )
    return Token(
        access_token=access_token,
        token_type="bearer",
        roles=sorted(role.value for role in roles),
    )


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> Response:
    """Revoke every token issued to the caller."""

    signout(db, context)
    logger.info("Identity %s signed out", context.identity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
