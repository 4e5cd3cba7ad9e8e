"""Routes for submitting, reviewing and withdrawing project requests."""

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Query,
    Response,
    UploadFile,
    status,
)
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.application.use_cases.requests import (
    create_project_request,
    delete_project_request,
    get_project_request,
    get_request_stats,
    list_project_requests,
    submit_project_request,
    update_project_request,
    update_request_status,
)
from app.domain.entities import AuthContext, ProjectRequest, RequestStatus
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_auth_context
from app.interfaces.api.routes_helpers import HANDLED_ERRORS, to_http_exception
from app.interfaces.api.schemas import (
    ProjectRequestCreate,
    ProjectRequestRead,
    ProjectRequestStatusUpdate,
    ProjectRequestUpdate,
    RequestStatsRead,
    SubmissionResponse,
)

from ._uploads import read_uploads, report_to_response

router = APIRouter(prefix="/requests", tags=["requests"])


def _to_read_model(request: ProjectRequest) -> ProjectRequestRead:
    return ProjectRequestRead.model_validate(request)


@router.get("/", response_model=list[ProjectRequestRead])
def list_requests(
    status_filter: RequestStatus | None = Query(None, alias="status"),
    search: str | None = Query(None, max_length=200),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> list[ProjectRequestRead]:
    """Return visible requests, newest first."""

    requests = list_project_requests(
        db, context, status=status_filter, search=search, skip=skip, limit=limit
    )
    return [_to_read_model(request) for request in requests]


@router.get("/stats", response_model=RequestStatsRead)
def read_request_stats(
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> RequestStatsRead:
    stats = get_request_stats(db, context)
    return RequestStatsRead(
        total=stats.total,
        **{item.value: stats.by_status.get(item, 0) for item in RequestStatus},
    )


@router.post("/", response_model=ProjectRequestRead, status_code=status.HTTP_201_CREATED)
def create_request(
    payload: ProjectRequestCreate,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> ProjectRequestRead:
    try:
        request = create_project_request(db, context, **payload.model_dump())
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(request)


@router.post("/submit", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
def submit_request(
    response: Response,
    request: str = Form(..., description="JSON encoded request fields"),
    files: list[UploadFile] | None = File(None),
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> SubmissionResponse:
    """Create a request and attach the uploaded files in one call.

    The request is kept even if some uploads fail; the response then carries
    status 207 and the per-file failures.
    """

    try:
        payload = ProjectRequestCreate.model_validate_json(request)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc

    try:
        result = submit_project_request(
            db, context, **payload.model_dump(), files=read_uploads(files)
        )
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc

    attachments = None
    if result.uploads.total:
        attachments = report_to_response(result.uploads, response)
    return SubmissionResponse(request=_to_read_model(result.request), attachments=attachments)


@router.get("/{request_id}", response_model=ProjectRequestRead)
def read_request(
    request_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> ProjectRequestRead:
    try:
        request = get_project_request(db, context, request_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(request)


@router.put("/{request_id}", response_model=ProjectRequestRead)
def update_request(
    request_id: str,
    payload: ProjectRequestUpdate,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> ProjectRequestRead:
    """Edit a request; owners only while pending, admins at any time."""

    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No changes provided")
    try:
        request = update_project_request(db, context, request_id, changes)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(request)


@router.patch("/{request_id}/status", response_model=ProjectRequestRead)
def change_request_status(
    request_id: str,
    payload: ProjectRequestStatusUpdate,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> ProjectRequestRead:
    try:
        request = update_request_status(db, context, request_id, payload.status)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(request)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_request(
    request_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> Response:
    try:
        delete_project_request(db, context, request_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
