"""Conversion of multipart uploads into application values."""

from fastapi import Response, UploadFile, status

from app.application.use_cases.attachments import UploadedFile, UploadReport
from app.interfaces.api.schemas import (
    AttachmentRead,
    AttachmentUploadResponse,
    UploadFailureRead,
)


def read_uploads(files: list[UploadFile] | None) -> list[UploadedFile]:
    uploads: list[UploadedFile] = []
    for file in files or []:
        uploads.append(
            UploadedFile(
                file_name=file.filename or "upload",
                content_type=file.content_type,
                data=file.file.read(),
            )
        )
    return uploads


def report_to_response(report: UploadReport, response: Response) -> AttachmentUploadResponse:
    """Build the upload payload; 207 when at least one file failed."""

    if report.failures:
        response.status_code = status.HTTP_207_MULTI_STATUS
    return AttachmentUploadResponse(
        summary=report.summary,
        uploaded=[AttachmentRead.model_validate(item) for item in report.uploaded],
        failures=[UploadFailureRead.model_validate(item) for item in report.failures],
    )
