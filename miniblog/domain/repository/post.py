"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from miniblog.domain.model.post import Post
from miniblog.domain.value import PostId
from miniblog.domain.value.common import ValueObject


class PostCriteria(ValueObject):
    """Storage-level filter for a post scan.

    All string filters are matched case-insensitively and exactly. A
    criteria object with no filters matches every stored post.
    """

    slug: Optional[str] = None
    category: Optional[str] = None
    tag: Optional[str] = None


class PostRepository(ABC):
    """Gateway for the Post aggregate.

    Every method works on fully populated aggregates: comments, tags and
    categories are always loaded and written together with the post.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            for_update: Lock the post until the surrounding transaction ends

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    def scan(self, criteria: PostCriteria) -> AsyncIterator[Post]:
        """Stream posts matching the criteria.

        Posts are yielded newest first (``pub_date`` descending, then by id)
        and reflect a single snapshot of the store.

        Args:
            criteria: Filters to apply

        Returns:
            Async iterator over matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        A post without an id is inserted under a newly generated id. The
        stored children are replaced so that they equal the post's.

        Args:
            post: The post to save

        Returns:
            The saved post, carrying its id
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its children.

        Deleting an absent post is a no-op.

        Args:
            post_id: The post ID to delete
        """
        pass
