"""Domain entities exposed by the application."""

from .attachment import Attachment
from .auth_context import AuthContext
from .comment import Comment
from .identity import Identity
from .notification import Notification
from .profile import Profile
from .project_request import (
    CONTENT_FIELDS,
    PROJECT_TYPES,
    ConfidentialityLevel,
    ProjectRequest,
    RequestStats,
    RequestStatus,
)
from .role import AppRole, RoleAssignment

__all__ = [
    "AppRole",
    "Attachment",
    "AuthContext",
    "CONTENT_FIELDS",
    "Comment",
    "ConfidentialityLevel",
    "Identity",
    "Notification",
    "PROJECT_TYPES",
    "Profile",
    "ProjectRequest",
    "RequestStats",
    "RequestStatus",
    "RoleAssignment",
]
