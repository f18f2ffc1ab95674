"""Post query domain service."""

from contextlib import aclosing
from typing import AsyncIterator, Optional
from urllib.parse import unquote_plus

import logfire

from miniblog.domain.error import InvalidArgumentError
from miniblog.domain.model.common import utc_now
from miniblog.domain.model.post import Post
from miniblog.domain.repository import PostCriteria, PostRepository
from miniblog.domain.value import PostId, parse_key

from .base import Service
from .visibility import is_visible


class PostQueryService(Service):
    """Domain service for reading posts.

    Every query applies the same visibility rule for the caller. Listing
    queries are async generators: they stream from the repository and can
    be consumed once.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post query service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def _visible_posts(
        self, criteria: PostCriteria, is_privileged: bool
    ) -> AsyncIterator[Post]:
        # One reference time per query so the whole result uses the same cut-off
        now = utc_now()
        async with aclosing(self.post_repository.scan(criteria)) as posts:
            async for post in posts:
                if is_visible(post, is_privileged, now):
                    yield post

    async def get_post_by_id(self, post_id: str, is_privileged: bool) -> Optional[Post]:
        """Get a post by ID.

        Args:
            post_id: Post ID in its external string form
            is_privileged: Whether the caller is the operator

        Returns:
            Post if found and visible, None otherwise
        """
        with logfire.span(
            "post_query_service.get_post_by_id",
            post_id=post_id,
            is_privileged=is_privileged,
        ):
            key = parse_key(post_id)
            if key is None:
                logfire.warn("Unparsable post id", post_id=post_id)
                return None

            post = await self.post_repository.find_by_id(PostId(key))
            if post is None or not is_visible(post, is_privileged):
                logfire.warn("Post not found", post_id=post_id)
                return None

            logfire.info("Post found", post_id=post_id, title=post.title)
            return post

    async def get_post_by_slug(self, slug: str, is_privileged: bool) -> Optional[Post]:
        """Get a post by slug.

        The slug is URL-decoded and matched case-insensitively. If several
        posts share the slug, the first visible one wins.

        Args:
            slug: Slug as it appears in a URL
            is_privileged: Whether the caller is the operator

        Returns:
            Post if found and visible, None otherwise
        """
        decoded = unquote_plus(slug).lower()
        with logfire.span(
            "post_query_service.get_post_by_slug",
            slug=decoded,
            is_privileged=is_privileged,
        ):
            async with aclosing(
                self._visible_posts(PostCriteria(slug=decoded), is_privileged)
            ) as posts:
                async for post in posts:
                    logfire.info(
                        "Post found by slug", slug=decoded, post_id=str(post.id)
                    )
                    return post

            logfire.warn("Post not found by slug", slug=decoded)
            return None

    async def get_posts(self, is_privileged: bool) -> AsyncIterator[Post]:
        """Stream all visible posts, newest first.

        Args:
            is_privileged: Whether the caller is the operator

        Yields:
            Visible posts ordered by publication date descending
        """
        logfire.info("Listing posts", is_privileged=is_privileged)
        async with aclosing(
            self._visible_posts(PostCriteria(), is_privileged)
        ) as posts:
            async for post in posts:
                yield post

    async def get_posts_page(
        self, count: int, skip: int, is_privileged: bool
    ) -> AsyncIterator[Post]:
        """Stream one page of visible posts, newest first.

        Args:
            count: Maximum number of posts to yield
            skip: Number of visible posts to skip
            is_privileged: Whether the caller is the operator

        Yields:
            Visible posts in the same order as ``get_posts``

        Raises:
            InvalidArgumentError: If count or skip is negative
        """
        if count < 0:
            raise InvalidArgumentError("count", "must not be negative")
        if skip < 0:
            raise InvalidArgumentError("skip", "must not be negative")

        logfire.info(
            "Listing posts page", count=count, skip=skip, is_privileged=is_privileged
        )
        if count == 0:
            return

        seen = 0
        yielded = 0
        async with aclosing(
            self._visible_posts(PostCriteria(), is_privileged)
        ) as posts:
            async for post in posts:
                seen += 1
                if seen <= skip:
                    continue
                yield post
                yielded += 1
                if yielded >= count:
                    break

    async def get_posts_by_category(
        self, category: str, is_privileged: bool
    ) -> AsyncIterator[Post]:
        """Stream visible posts filed under a category.

        Args:
            category: Category name (case-insensitive)
            is_privileged: Whether the caller is the operator

        Yields:
            Visible posts in the category
        """
        name = category.lower()
        logfire.info("Listing posts by category", category=name)
        async with aclosing(
            self._visible_posts(PostCriteria(category=name), is_privileged)
        ) as posts:
            async for post in posts:
                yield post

    async def get_posts_by_tag(self, tag: str, is_privileged: bool) -> AsyncIterator[Post]:
        """Stream visible posts carrying a tag.

        Args:
            tag: Tag name (case-insensitive)
            is_privileged: Whether the caller is the operator

        Yields:
            Visible posts with the tag
        """
        name = tag.lower()
        logfire.info("Listing posts by tag", tag=name)
        async with aclosing(
            self._visible_posts(PostCriteria(tag=name), is_privileged)
        ) as posts:
            async for post in posts:
                yield post

    async def get_categories(self, is_privileged: bool) -> AsyncIterator[str]:
        """Stream distinct category names used by visible posts.

        Args:
            is_privileged: Whether the caller is the operator

        Yields:
            Lower-cased category names, each once
        """
        seen: set[str] = set()
        async with aclosing(
            self._visible_posts(PostCriteria(), is_privileged)
        ) as posts:
            async for post in posts:
                for name in post.category_names:
                    if name not in seen:
                        seen.add(name)
                        yield name

    async def get_tags(self, is_privileged: bool) -> AsyncIterator[str]:
        """Stream distinct tag names used by visible posts.

        Args:
            is_privileged: Whether the caller is the operator

        Yields:
            Lower-cased tag names, each once
        """
        seen: set[str] = set()
        async with aclosing(
            self._visible_posts(PostCriteria(), is_privileged)
        ) as posts:
            async for post in posts:
                for name in post.tag_names:
                    if name not in seen:
                        seen.add(name)
                        yield name
