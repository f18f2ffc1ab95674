"""Domain model entities for the blog."""

from miniblog.domain.model.comment import Comment
from miniblog.domain.model.post import Post
from miniblog.domain.model.representation import (
    CommentRepresentation,
    PostRepresentation,
)

__all__ = [
    "Post",
    "Comment",
    "PostRepresentation",
    "CommentRepresentation",
]
