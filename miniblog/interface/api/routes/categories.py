"""Category routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from miniblog.application.usecase.category import (
    ListCategoriesRequest,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from miniblog.domain.error import StorageError
from miniblog.domain.service import JWTService

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListCategoriesResponse,
    summary="List categories in use",
    description="Get the distinct categories of all posts visible to the caller.",
)
async def list_categories(
    use_case: FromDishka[ListCategoriesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListCategoriesResponse:
    """List categories used by visible posts."""
    is_privileged = jwt_service.is_privileged(auth_token)
    with logfire.span("api.list_categories", is_privileged=is_privileged):
        try:
            return await use_case.execute(
                ListCategoriesRequest(is_privileged=is_privileged)
            )
        except StorageError as e:
            logfire.error("Storage failure listing categories", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Post storage is unavailable",
            )
