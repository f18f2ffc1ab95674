"""Visibility rules for posts."""

from datetime import datetime
from typing import Optional

from miniblog.domain.model.common import utc_now
from miniblog.domain.model.post import Post


def is_visible(
    post: Post, is_privileged: bool, now: Optional[datetime] = None
) -> bool:
    """Check whether the caller may see a post.

    The operator sees everything, including drafts and scheduled posts.
    Anonymous readers only see posts that are published and whose
    publication date has passed.

    Args:
        post: The post to check
        is_privileged: Whether the caller is the authenticated operator
        now: Reference time (defaults to the current UTC time)

    Returns:
        True if the post may be shown to the caller
    """
    if is_privileged:
        return True

    if now is None:
        now = utc_now()

    return post.is_published and post.pub_date < now
