"""List categories use case."""

import logfire
from pydantic import BaseModel

from miniblog.domain.service import PostQueryService


class ListCategoriesRequest(BaseModel):
    """List categories request."""

    is_privileged: bool = False


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[str]


class ListCategoriesUseCase:
    """Use case for listing the categories used by visible posts."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        self.post_query_service = post_query_service

    async def execute(self, request: ListCategoriesRequest) -> ListCategoriesResponse:
        """Execute list categories flow."""
        with logfire.span(
            "list_categories.execute", is_privileged=request.is_privileged
        ):
            categories = [
                name
                async for name in self.post_query_service.get_categories(
                    request.is_privileged
                )
            ]

            logfire.info("Categories listed", count=len(categories))

            return ListCategoriesResponse(categories=categories)
