"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from miniblog.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from miniblog.domain.error import StorageError
from miniblog.domain.service import JWTService

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List tags in use",
    description="Get the distinct tags of all posts visible to the caller.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListTagsResponse:
    """List tags used by visible posts.

    Args:
        use_case: List tags use case (injected)
        jwt_service: JWT service (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        List of tag names

    Example:
        GET /tags
    """
    is_privileged = jwt_service.is_privileged(auth_token)
    with logfire.span("api.list_tags", is_privileged=is_privileged):
        try:
            return await use_case.execute(
                ListTagsRequest(is_privileged=is_privileged)
            )
        except StorageError as e:
            logfire.error("Storage failure listing tags", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Post storage is unavailable",
            )
