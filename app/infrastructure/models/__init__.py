"""ORM models used by the application infrastructure."""

from .attachment import AttachmentModel
from .comment import CommentModel
from .identity import IdentityModel
from .notification import NotificationModel
from .profile import ProfileModel
from .project_request import ProjectRequestModel
from .role import RoleAssignmentModel

__all__ = [
    "AttachmentModel",
    "CommentModel",
    "IdentityModel",
    "NotificationModel",
    "ProfileModel",
    "ProjectRequestModel",
    "RoleAssignmentModel",
]
