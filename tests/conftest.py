"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest

from miniblog.domain.model import Comment, Post
from miniblog.domain.value import CategoryName, CommentId, PostId, TagName


@pytest.fixture(scope="session", autouse=True)
def configure_logfire():
    """Configure logfire once so spans in tests stay local and quiet."""
    logfire.configure(send_to_logfire=False, console=False)


def days_ago(days: float) -> datetime:
    """UTC timestamp ``days`` in the past (negative values are in the future)."""
    return datetime.now(timezone.utc) - timedelta(days=days)


def make_comment(content: str = "Nice post", **overrides) -> Comment:
    """Helper function to build a stored comment with a key."""
    values = {
        "id": CommentId(uuid4()),
        "author": "reader",
        "email": "reader@example.com",
        "content": content,
        "is_admin": False,
        "pub_date": days_ago(1),
    }
    values.update(overrides)
    return Comment(**values)


def make_post(
    title: str = "Test Post",
    tags: list[str] | None = None,
    categories: list[str] | None = None,
    **overrides,
) -> Post:
    """Helper function to build a stored, published post.

    Args:
        title: Post title, also used to derive the slug
        tags: Tag names
        categories: Category names
        **overrides: Any other Post field

    Returns:
        Post with a key, published two days ago
    """
    values = {
        "id": PostId(uuid4()),
        "title": title,
        "slug": title.lower().replace(" ", "-"),
        "content": f"<p>{title}</p>",
        "excerpt": title,
        "is_published": True,
        "pub_date": days_ago(2),
        "last_modified": days_ago(2),
        "tags": [TagName(t) for t in tags or []],
        "categories": [CategoryName(c) for c in categories or []],
    }
    values.update(overrides)
    return Post(**values)
