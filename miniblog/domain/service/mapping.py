"""Conversion between the post aggregate and its caller-facing form."""

from typing import Optional

from miniblog.domain.model import (
    Comment,
    CommentRepresentation,
    Post,
    PostRepresentation,
)
from miniblog.domain.value import CommentId, parse_key


def comment_to_wire_form(comment: Comment) -> CommentRepresentation:
    """Convert a stored comment to its caller-facing form."""
    return CommentRepresentation(
        id=str(comment.id) if comment.id else "",
        author=comment.author,
        email=comment.email,
        content=comment.content,
        is_admin=comment.is_admin,
        pub_date=comment.pub_date,
    )


def comment_from_wire_form(comment: CommentRepresentation) -> Comment:
    """Convert a submitted comment to a domain comment.

    An empty or unparsable key yields an unassigned comment.
    """
    key = parse_key(comment.id)
    return Comment(
        id=CommentId(key) if key else None,
        author=comment.author,
        email=comment.email,
        content=comment.content,
        is_admin=comment.is_admin,
        pub_date=comment.pub_date,
    )


def to_wire_form(post: Optional[Post]) -> Optional[PostRepresentation]:
    """Convert a post aggregate to its caller-facing form.

    Args:
        post: The aggregate, or None when a lookup found nothing

    Returns:
        The representation, or None when there is no post
    """
    if post is None:
        return None

    return PostRepresentation(
        id=str(post.id) if post.id else "",
        title=post.title,
        slug=post.slug,
        content=post.content,
        excerpt=post.excerpt,
        is_published=post.is_published,
        pub_date=post.pub_date,
        last_modified=post.last_modified,
        comments=[comment_to_wire_form(c) for c in post.comments],
        tags=post.tag_names,
        categories=post.category_names,
    )
