"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from miniblog.domain.model import Comment, Post
from miniblog.domain.value import CategoryName, CommentId, PostId, TagName


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        author=row["author"],
        email=row["email"],
        content=row["content"],
        is_admin=row["is_admin"],
        pub_date=row["pub_date"],
    )


def comment_to_dict(comment: Comment, post_id: PostId, position: int) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model (must carry an id)
        post_id: Owning post
        position: Index of the comment within the post

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        **comment.model_dump(),
        "post_id": post_id,
        "position": position,
    }


def row_to_post(
    row: Dict[str, Any],
    comments: list[Comment] | None = None,
    tag_names: list[str] | None = None,
    category_names: list[str] | None = None,
) -> Post:
    """Convert database row and child rows to Post domain model.

    Args:
        row: Post row as dict
        comments: Comments of the post, in position order
        tag_names: Tag names of the post, in position order
        category_names: Category names of the post, in position order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        slug=row["slug"],
        content=row["content"],
        excerpt=row["excerpt"],
        is_published=row["is_published"],
        pub_date=row["pub_date"],
        last_modified=row["last_modified"],
        comments=comments or [],
        tags=[TagName(name) for name in tag_names or []],
        categories=[CategoryName(name) for name in category_names or []],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts table dict.

    Children are written to their own tables and are excluded here.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump(exclude={"comments", "tags", "categories"})
