"""Repository implementations for infrastructure layer."""

from .attachment_repository import AttachmentRepository
from .comment_repository import CommentRepository
from .identity_repository import IdentityRepository
from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository
from .project_request_repository import ProjectRequestRepository
from .role_repository import RoleAssignmentRepository

__all__ = [
    "AttachmentRepository",
    "CommentRepository",
    "IdentityRepository",
    "NotificationRepository",
    "ProfileRepository",
    "ProjectRequestRepository",
    "RoleAssignmentRepository",
]
