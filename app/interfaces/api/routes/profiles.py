"""Routes for reading and editing profiles."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.profiles import (
    create_own_profile,
    get_profile,
    list_profiles as list_profiles_uc,
    update_own_profile,
)
from app.domain.entities import AuthContext, Profile
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_auth_context, require_admin_context
from app.interfaces.api.routes_helpers import HANDLED_ERRORS, to_http_exception
from app.interfaces.api.schemas import ProfileCreate, ProfileRead, ProfileUpdate

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _to_read_model(profile: Profile) -> ProfileRead:
    return ProfileRead.model_validate(profile)


@router.get("/me", response_model=ProfileRead)
def read_own_profile(
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> ProfileRead:
    try:
        profile = get_profile(db, context, context.identity_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(profile)


@router.post("/me", response_model=ProfileRead, status_code=status.HTTP_201_CREATED)
def create_profile(
    payload: ProfileCreate,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> ProfileRead:
    """Create the caller's profile if signup did not."""

    try:
        profile = create_own_profile(db, context, full_name=payload.full_name)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_read_model(profile)


@router.put("/me", response_model=ProfileRead)
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> ProfileRead:
    try:
        profile = update_own_profile(db, context, full_name=payload.full_name)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(profile)


@router.get("/", response_model=list[ProfileRead])
def list_profiles(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    db: Session = Depends(get_db),
    context: AuthContext = Depends(require_admin_context),
) -> list[ProfileRead]:
    """Return every profile; administrators only."""

    return [_to_read_model(p) for p in list_profiles_uc(db, context, skip=skip, limit=limit)]
