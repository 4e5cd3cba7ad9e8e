"""Routes for administrator comments on requests."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.comments import (
    create_comment as create_comment_uc,
    delete_comment as delete_comment_uc,
    list_comments as list_comments_uc,
    update_comment as update_comment_uc,
)
from app.domain.entities import AuthContext, Comment
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_auth_context
from app.interfaces.api.routes_helpers import HANDLED_ERRORS, to_http_exception
from app.interfaces.api.schemas import CommentCreate, CommentRead, CommentUpdate

router = APIRouter(tags=["comments"])


def _to_read_model(comment: Comment) -> CommentRead:
    return CommentRead.model_validate(comment)


@router.get("/requests/{request_id}/comments", response_model=list[CommentRead])
def list_comments(
    request_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> list[CommentRead]:
    """Return the comments on a request, oldest first."""

    try:
        comments = list_comments_uc(db, context, request_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return [_to_read_model(comment) for comment in comments]


@router.post(
    "/requests/{request_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    request_id: str,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> CommentRead:
    """Comment on a request and notify its owner."""

    try:
        comment = create_comment_uc(db, context, request_id, body=payload.comment)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(comment)


@router.put("/comments/{comment_id}", response_model=CommentRead)
def update_comment(
    comment_id: str,
    payload: CommentUpdate,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> CommentRead:
    try:
        comment = update_comment_uc(db, context, comment_id, body=payload.comment)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(comment)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
) -> Response:
    try:
        delete_comment_uc(db, context, comment_id)
    except HANDLED_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
