"""Save post use case."""

import logfire
from pydantic import BaseModel

from miniblog.domain.model import PostRepresentation
from miniblog.domain.service import PostService, to_wire_form


class SavePostRequest(BaseModel):
    """Save post request."""

    post: PostRepresentation
    is_privileged: bool = False


class SavePostResponse(PostRepresentation):
    """Save post response (the post as stored)."""


class SavePostUseCase:
    """Use case for creating or editing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize save post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: SavePostRequest) -> SavePostResponse:
        """Execute save post flow.

        Args:
            request: Save post request

        Returns:
            The saved post with its assigned keys

        Raises:
            NotAuthorizedError: If the caller is not the operator
        """
        with logfire.span(
            "save_post.execute",
            post_id=request.post.id,
            title=request.post.title,
        ):
            saved = await self.post_service.save_post(
                request.post, request.is_privileged
            )
            return SavePostResponse(**to_wire_form(saved).model_dump())
