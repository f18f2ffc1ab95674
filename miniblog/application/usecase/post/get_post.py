"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from miniblog.domain.model import PostRepresentation
from miniblog.domain.service import PostQueryService, to_wire_form


class GetPostRequest(BaseModel):
    """Get post request.

    Accepts either post_id or slug for lookup.
    """

    post_id: str | None = None
    slug: str | None = None  # URL slug, may still be URL-encoded
    is_privileged: bool = False

    def model_post_init(self, __context):
        """Validate that exactly one of post_id or slug is provided."""
        if not self.post_id and not self.slug:
            raise ValueError("Either post_id or slug must be provided")
        if self.post_id and self.slug:
            raise ValueError("Provide either post_id or slug, not both")


class GetPostResponse(PostRepresentation):
    """Get post response."""


class GetPostUseCase:
    """Use case for retrieving a single post."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        """Initialize get post use case.

        Args:
            post_query_service: Post query domain service
        """
        self.post_query_service = post_query_service

    async def execute(self, request: GetPostRequest) -> Optional[GetPostResponse]:
        """Execute get post flow.

        Args:
            request: Get post request with post ID or slug

        Returns:
            Post details if found and visible to the caller, None otherwise
        """
        if request.slug:
            post = await self.post_query_service.get_post_by_slug(
                request.slug, request.is_privileged
            )
        else:
            post = await self.post_query_service.get_post_by_id(
                request.post_id, request.is_privileged
            )

        representation = to_wire_form(post)
        if representation is None:
            return None

        return GetPostResponse(**representation.model_dump())
