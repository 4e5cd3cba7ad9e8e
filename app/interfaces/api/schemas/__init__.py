from .attachment import (
    AttachmentDownloadRead,
    AttachmentRead,
    AttachmentUploadResponse,
    UploadFailureRead,
)
from .auth import SignupRequest, SignupResponse, Token
from .comment import CommentCreate, CommentRead, CommentUpdate
from .notification import (
    NotificationMarkRead,
    NotificationMarkReadResponse,
    NotificationRead,
    UnreadCountRead,
)
from .profile import ProfileCreate, ProfileRead, ProfileUpdate
from .project_request import (
    ProjectRequestCreate,
    ProjectRequestRead,
    ProjectRequestStatusUpdate,
    ProjectRequestUpdate,
    RequestStatsRead,
)
from .role import RoleAssignmentRead
from .submission import SubmissionResponse

__all__ = [
    "AttachmentDownloadRead",
    "AttachmentRead",
    "AttachmentUploadResponse",
    "CommentCreate",
    "CommentRead",
    "CommentUpdate",
    "NotificationMarkRead",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "ProfileCreate",
    "ProfileRead",
    "ProfileUpdate",
    "ProjectRequestCreate",
    "ProjectRequestRead",
    "ProjectRequestStatusUpdate",
    "ProjectRequestUpdate",
    "RequestStatsRead",
    "RoleAssignmentRead",
    "SignupRequest",
    "SignupResponse",
    "SubmissionResponse",
    "Token",
    "UnreadCountRead",
    "UploadFailureRead",
]
