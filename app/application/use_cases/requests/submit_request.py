"""Use case submitting a request together with its initial attachments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from app.application.use_cases.attachments.upload_attachments import (
    UploadedFile,
    UploadReport,
    upload_attachments,
)
from app.domain.entities import AuthContext, ConfidentialityLevel, ProjectRequest

from .create_request import create_project_request


@dataclass
class SubmissionResult:
    request: ProjectRequest
    uploads: UploadReport = field(default_factory=UploadReport)


def submit_project_request(
    session: Session,
    context: AuthContext,
    *,
    title: str,
    project_types: list[str],
    problem_statement: str,
    expected_outcomes: str,
    strategic_alignment: str | None = None,
    estimated_duration: str | None = None,
    key_dependencies: str | None = None,
    confidentiality_level: ConfidentialityLevel = ConfidentialityLevel.INTERNAL,
    files: Sequence[UploadedFile] = (),
) -> SubmissionResult:
    """Create the request, then attach each file independently.

    The request stays submitted even when some or all uploads fail; the
    report lists each failure.
    """

    request = create_project_request(
        session,
        context,
        title=title,
        project_types=project_types,
        problem_statement=problem_statement,
        expected_outcomes=expected_outcomes,
        strategic_alignment=strategic_alignment,
        estimated_duration=estimated_duration,
        key_dependencies=key_dependencies,
        confidentiality_level=confidentiality_level,
    )
    if not files:
        return SubmissionResult(request=request)
    report = upload_attachments(session, context, request.id, files)
    return SubmissionResult(request=request, uploads=report)
