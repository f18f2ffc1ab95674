"""In-memory post repository for testing."""

from typing import AsyncIterator, Optional
from uuid import uuid4

from miniblog.domain.model.post import Post
from miniblog.domain.repository.post import PostCriteria, PostRepository
from miniblog.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        post = self._posts.get(post_id)
        return post.model_copy(deep=True) if post else None

    async def scan(self, criteria: PostCriteria) -> AsyncIterator[Post]:
        """Stream posts matching the criteria, newest first."""
        posts = list(self._posts.values())

        if criteria.slug is not None:
            slug = criteria.slug.lower()
            posts = [p for p in posts if p.slug.lower() == slug]

        if criteria.category is not None:
            category = criteria.category.lower()
            posts = [p for p in posts if category in p.category_names]

        if criteria.tag is not None:
            tag = criteria.tag.lower()
            posts = [p for p in posts if tag in p.tag_names]

        # Newest first, ties broken by id
        posts.sort(key=lambda p: str(p.id))
        posts.sort(key=lambda p: p.pub_date, reverse=True)

        for post in posts:
            yield post.model_copy(deep=True)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        if post.id is None:
            post = post.model_copy(update={"id": PostId(uuid4())})
        self._posts[post.id] = post.model_copy(deep=True)
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
