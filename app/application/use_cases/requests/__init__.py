"""Use cases for the project request lifecycle."""

from .get_request import get_project_request, get_request_stats, list_project_requests
from .create_request import create_project_request
from .update_request import update_project_request, update_request_status
from .delete_request import delete_project_request
from .submit_request import SubmissionResult, submit_project_request

__all__ = [
    "SubmissionResult",
    "create_project_request",
    "delete_project_request",
    "get_project_request",
    "get_request_stats",
    "list_project_requests",
    "submit_project_request",
    "update_project_request",
    "update_request_status",
]
