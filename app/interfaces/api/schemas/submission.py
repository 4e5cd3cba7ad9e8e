"""Schemas for a request submitted together with its attachments."""

from pydantic import BaseModel

from .attachment import AttachmentUploadResponse
from .project_request import ProjectRequestRead


class SubmissionResponse(BaseModel):
    request: ProjectRequestRead
    attachments: AttachmentUploadResponse | None = None


__all__ = ["SubmissionResponse"]
