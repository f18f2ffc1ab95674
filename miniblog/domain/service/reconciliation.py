"""Identity-preserving merge of a submitted post into the stored aggregate.

The submission decides which children a post has after a save. Stored
children that are submitted again keep their stored identity and content,
children that are new receive a fresh key, and stored children that are
not submitted are dropped.

When a submission repeats a key or a name, the last occurrence wins.
"""

from datetime import datetime
from typing import Iterable, Optional, TypeVar
from uuid import UUID, uuid4

from miniblog.domain.model import (
    Comment,
    CommentRepresentation,
    Post,
    PostRepresentation,
)
from miniblog.domain.service.mapping import comment_from_wire_form
from miniblog.domain.value import CategoryName, CommentId, TagName
from miniblog.domain.value.types import NormalizedName

N = TypeVar("N", bound=NormalizedName)


def reconcile_comments(
    stored: list[Comment], submitted: list[CommentRepresentation]
) -> list[Comment]:
    """Merge submitted comments into the stored ones.

    Args:
        stored: Comments currently persisted for the post
        submitted: Comments in the caller's submission, in order

    Returns:
        The post's comments after the save, in submission order
    """
    stored_by_key: dict[UUID, Comment] = {c.id: c for c in stored if c.id}

    # Keyless submissions are always new and never collapse into each other
    merged: dict[UUID | int, Comment] = {}
    for position, item in enumerate(submitted):
        comment = comment_from_wire_form(item)

        if comment.id is None:
            merged[position] = comment.model_copy(update={"id": CommentId(uuid4())})
            continue

        merged.pop(comment.id, None)
        kept = stored_by_key.get(comment.id)
        if kept is not None:
            merged[comment.id] = kept
        else:
            merged[comment.id] = comment.model_copy(
                update={"id": CommentId(uuid4())}
            )

    return list(merged.values())


def reconcile_names(
    stored: list[N], submitted: Iterable[str], name_type: type[N]
) -> list[N]:
    """Merge submitted tag or category names into the stored ones.

    Blank names are ignored.

    Args:
        stored: Names currently persisted for the post
        submitted: Names in the caller's submission, in order
        name_type: Value object to normalize the names with

    Returns:
        Distinct names after the save, in submission order
    """
    stored_by_name = {name.root: name for name in stored}

    merged: dict[str, N] = {}
    for raw in submitted:
        if not raw or not raw.strip():
            continue
        name = name_type(raw)
        merged.pop(name.root, None)
        merged[name.root] = stored_by_name.get(name.root, name)

    return list(merged.values())


def reconcile(
    existing: Optional[Post], incoming: PostRepresentation, now: datetime
) -> Post:
    """Build the aggregate to persist for a submission.

    Args:
        existing: The stored aggregate, or None for a new post
        incoming: The caller's submission
        now: Time of the save, written to ``last_modified``

    Returns:
        Aggregate ready to save; ``id`` is None when the post is new
    """
    base = existing if existing is not None else Post()

    return Post(
        id=base.id,
        title=incoming.title,
        slug=incoming.slug,
        content=incoming.content,
        excerpt=incoming.excerpt,
        is_published=incoming.is_published,
        pub_date=incoming.pub_date,
        last_modified=now,
        comments=reconcile_comments(base.comments, incoming.comments),
        tags=reconcile_names(base.tags, incoming.tags, TagName),
        categories=reconcile_names(base.categories, incoming.categories, CategoryName),
    )
