"""Use cases for administrator comments."""

from .create_comment import create_comment
from .manage_comments import delete_comment, list_comments, update_comment

__all__ = ["create_comment", "delete_comment", "list_comments", "update_comment"]
