"""List posts use case."""

from typing import AsyncIterator

import logfire
from pydantic import BaseModel, Field, model_validator

from miniblog.domain.model import Post, PostRepresentation
from miniblog.domain.service import PostQueryService, to_wire_form


class ListPostsRequest(BaseModel):
    """List posts request.

    ``category`` and ``tag`` are mutually exclusive. ``count`` and ``skip``
    page the unfiltered listing; without ``count`` all matching posts are
    returned.
    """

    category: str | None = None
    tag: str | None = None
    count: int | None = Field(default=None, ge=0)
    skip: int = Field(default=0, ge=0)
    is_privileged: bool = False

    @model_validator(mode="after")
    def validate_single_filter(self) -> "ListPostsRequest":
        """Reject requests that filter by both category and tag."""
        if self.category and self.tag:
            raise ValueError("Filter by category or by tag, not both")
        return self


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostRepresentation]
    count: int | None
    skip: int


class ListPostsUseCase:
    """Use case for listing posts visible to the caller."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        """Initialize list posts use case.

        Args:
            post_query_service: Post query domain service
        """
        self.post_query_service = post_query_service

    def _select(self, request: ListPostsRequest) -> AsyncIterator[Post]:
        service = self.post_query_service
        if request.category:
            return service.get_posts_by_category(request.category, request.is_privileged)
        if request.tag:
            return service.get_posts_by_tag(request.tag, request.is_privileged)
        if request.count is not None:
            return service.get_posts_page(
                request.count, request.skip, request.is_privileged
            )
        return service.get_posts(request.is_privileged)

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and paging

        Returns:
            Posts matching the request, newest first
        """
        with logfire.span(
            "list_posts.execute",
            category=request.category,
            tag=request.tag,
            count=request.count,
            skip=request.skip,
            is_privileged=request.is_privileged,
        ):
            posts = [to_wire_form(post) async for post in self._select(request)]

            logfire.info("Posts listed", count=len(posts))

            return ListPostsResponse(
                posts=posts,
                count=request.count,
                skip=request.skip,
            )
