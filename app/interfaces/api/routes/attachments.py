"""Routes for request attachments."""

from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.application.use_cases.attachments import (
    delete_attachment as delete_attachment_uc,
    get_attachment_download,
    list_attachments as list_attachments_uc,
    upload_attachments,
)
from app.domain.entities import AuthContext
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_auth_context
from app.interfaces.api.routes_helpers import HANDLED_ERRORS, to_http_exception
from app.interfaces.api.schemas import (
    AttachmentDownloadRead,
    AttachmentRead,
    AttachmentUploadResponse,
)

from ._uploads import read_uploads, report_to_response

router = APIRouter(tags=["attachments"])


@router.get("/requests/{request_id}/attachments", response_model=list[AttachmentRead])
def list_attachments(
    request_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> list[AttachmentRead]:
    try:
        attachments = list_attachments_uc(db, context, request_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return [AttachmentRead.model_validate(item) for item in attachments]


@router.post(
    "/requests/{request_id}/attachments",
    response_model=AttachmentUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
def upload_request_attachments(
    request_id: str,
    response: Response,
    files: list[UploadFile] = File(...),
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> AttachmentUploadResponse:
    """Upload each file independently; 207 reports partial failures."""

    uploads = read_uploads(files)
    try:
        report = upload_attachments(db, context, request_id, uploads)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc

    return report_to_response(report, response)


@router.get("/attachments/{attachment_id}/download-url", response_model=AttachmentDownloadRead)
def read_download_url(
    attachment_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> AttachmentDownloadRead:
    """Return a signed link valid for a short time."""

    try:
        download = get_attachment_download(db, context, attachment_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return AttachmentDownloadRead.model_validate(download)


@router.delete("/attachments/{attachment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_attachment(
    attachment_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> Response:
    try:
        delete_attachment_uc(db, context, attachment_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
