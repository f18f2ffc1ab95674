"""Domain services."""

from .base import Service
from .file_service import FileService
from .jwt_service import JWTService
from .mapping import comment_from_wire_form, comment_to_wire_form, to_wire_form
from .post_query_service import PostQueryService
from .post_service import PostService
from .reconciliation import reconcile, reconcile_comments, reconcile_names
from .visibility import is_visible

__all__ = [
    "FileService",
    "JWTService",
    "PostQueryService",
    "PostService",
    "Service",
    "comment_from_wire_form",
    "comment_to_wire_form",
    "is_visible",
    "reconcile",
    "reconcile_comments",
    "reconcile_names",
    "to_wire_form",
]
