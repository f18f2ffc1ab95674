"""Domain value objects for the blog."""

from miniblog.domain.value.identifiers import CommentId, PostId, parse_key
from miniblog.domain.value.types import CategoryName, TagName

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "parse_key",
    # Types
    "TagName",
    "CategoryName",
]
