"""Delete post use case."""

from pydantic import BaseModel

from miniblog.domain.service import PostService


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    is_privileged: bool = False


class DeletePostUseCase:
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Deleting a post that does not exist succeeds without effect.

        Args:
            request: Delete post request

        Raises:
            NotAuthorizedError: If the caller is not the operator
        """
        await self.post_service.delete_post(request.post_id, request.is_privileged)
