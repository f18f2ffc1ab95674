"""List tags use case."""

import logfire
from pydantic import BaseModel

from miniblog.domain.service import PostQueryService


class ListTagsRequest(BaseModel):
    """List tags request."""

    is_privileged: bool = False


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[str]


class ListTagsUseCase:
    """Use case for listing the tags used by visible posts."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        """Initialize list tags use case.

        Args:
            post_query_service: Post query domain service
        """
        self.post_query_service = post_query_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Distinct lower-cased tag names
        """
        with logfire.span("list_tags.execute", is_privileged=request.is_privileged):
            tags = [
                name
                async for name in self.post_query_service.get_tags(
                    request.is_privileged
                )
            ]

            logfire.info("Tags listed", count=len(tags))

            return ListTagsResponse(tags=tags)
