"""Post domain service."""

from typing import Optional

import logfire

from miniblog.domain.error import InvalidArgumentError, NotAuthorizedError
from miniblog.domain.model.common import utc_now
from miniblog.domain.model.post import Post
from miniblog.domain.model.representation import PostRepresentation
from miniblog.domain.repository import PostRepository
from miniblog.domain.value import PostId, parse_key

from .base import Service
from .reconciliation import reconcile


class PostService(Service):
    """Domain service for changing posts."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(
        self, post: Optional[PostRepresentation], is_privileged: bool
    ) -> Post:
        """Save a submitted post.

        The stored aggregate is read under a row lock, reconciled with the
        submission and written back in the same transaction.

        Args:
            post: The submitted post
            is_privileged: Whether the caller is the operator

        Returns:
            Saved post

        Raises:
            InvalidArgumentError: If no post is given
            NotAuthorizedError: If the caller is not the operator
        """
        if post is None:
            raise InvalidArgumentError("post")
        if not is_privileged:
            raise NotAuthorizedError("save posts")

        with logfire.span(
            "post_service.save_post", post_id=post.id, title=post.title
        ):
            existing = None
            key = parse_key(post.id)
            if key is not None:
                existing = await self.post_repository.find_by_id(
                    PostId(key), for_update=True
                )

            if existing is None:
                logfire.info("Saving new post", title=post.title)

            aggregate = reconcile(existing, post, utc_now())
            saved = await self.post_repository.save(aggregate)

            logfire.info(
                "Post saved",
                post_id=str(saved.id),
                comments=len(saved.comments),
                tags=saved.tag_names,
                categories=saved.category_names,
            )
            return saved

    async def delete_post(
        self, post: Optional[PostRepresentation | str], is_privileged: bool
    ) -> None:
        """Delete a post.

        Deleting a post that does not exist is a no-op.

        Args:
            post: The post, or its ID in external string form
            is_privileged: Whether the caller is the operator

        Raises:
            InvalidArgumentError: If no post is given
            NotAuthorizedError: If the caller is not the operator
        """
        if post is None:
            raise InvalidArgumentError("post")
        if not is_privileged:
            raise NotAuthorizedError("delete posts")

        post_id = post.id if isinstance(post, PostRepresentation) else post
        with logfire.span("post_service.delete_post", post_id=post_id):
            key = parse_key(post_id)
            if key is None:
                logfire.warn("Nothing to delete for unparsable id", post_id=post_id)
                return

            await self.post_repository.delete(PostId(key))
            logfire.info("Post deleted", post_id=post_id)
