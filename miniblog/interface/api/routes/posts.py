"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, Response, status

from miniblog.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    SavePostRequest,
    SavePostResponse,
    SavePostUseCase,
)
from miniblog.config import Settings
from miniblog.domain.error import (
    InvalidArgumentError,
    NotAuthorizedError,
    StorageError,
)
from miniblog.domain.model import PostRepresentation
from miniblog.domain.service import JWTService

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


def _storage_unavailable(e: StorageError) -> HTTPException:
    logfire.error("Storage failure", error=str(e))
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Post storage is unavailable",
    )


async def _list(
    use_case: ListPostsUseCase, request: ListPostsRequest
) -> ListPostsResponse:
    try:
        return await use_case.execute(request)
    except InvalidArgumentError as e:
        logfire.warn("List posts validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        raise _storage_unavailable(e)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    count: int | None = Query(default=None, ge=0),
    skip: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List one page of posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service from DI
        settings: Application settings from DI
        count: Page size, defaults to ``blog.posts_per_page``
        skip: Number of posts to skip
        auth_token: JWT token from cookie (optional)

    Returns:
        Page of posts
    """
    request = ListPostsRequest(
        count=settings.blog.posts_per_page if count is None else count,
        skip=skip,
        is_privileged=jwt_service.is_privileged(auth_token),
    )
    return await _list(list_posts_use_case, request)


@router.get("/category/{name}", response_model=ListPostsResponse)
async def list_posts_by_category(
    name: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts filed under a category."""
    request = ListPostsRequest(
        category=name, is_privileged=jwt_service.is_privileged(auth_token)
    )
    return await _list(list_posts_use_case, request)


@router.get("/tag/{name}", response_model=ListPostsResponse)
async def list_posts_by_tag(
    name: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts carrying a tag."""
    request = ListPostsRequest(
        tag=name, is_privileged=jwt_service.is_privileged(auth_token)
    )
    return await _list(list_posts_use_case, request)


@router.get("/slug/{slug}", response_model=GetPostResponse)
async def get_post_by_slug(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a post by its slug.

    Args:
        slug: Post slug, matched case-insensitively
        get_post_use_case: Get post use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Post details

    Raises:
        HTTPException: If the post is not found or not visible
    """
    try:
        post = await get_post_use_case.execute(
            GetPostRequest(
                slug=slug, is_privileged=jwt_service.is_privileged(auth_token)
            )
        )
    except StorageError as e:
        raise _storage_unavailable(e)

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a post by ID.

    Args:
        post_id: Post ID; anything that is not a valid key is simply not found
        get_post_use_case: Get post use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Post details

    Raises:
        HTTPException: If the post is not found or not visible
    """
    try:
        post = await get_post_use_case.execute(
            GetPostRequest(
                post_id=post_id, is_privileged=jwt_service.is_privileged(auth_token)
            )
        )
    except StorageError as e:
        raise _storage_unavailable(e)

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post


@router.put("", response_model=SavePostResponse)
async def save_post(
    post: PostRepresentation,
    save_post_use_case: FromDishka[SavePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SavePostResponse:
    """Create or edit a post.

    Comments, tags and categories in the body are reconciled against the
    stored post. Requires the operator token.

    Args:
        post: Submitted post
        save_post_use_case: Save post use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        The post as stored

    Raises:
        HTTPException: If not authorized or the post is invalid
    """
    try:
        return await save_post_use_case.execute(
            SavePostRequest(
                post=post, is_privileged=jwt_service.is_privileged(auth_token)
            )
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post save attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to save posts",
        )
    except InvalidArgumentError as e:
        logfire.warn("Post save validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        # Names rejected while building the aggregate
        logfire.warn("Post save validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        raise _storage_unavailable(e)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a post and all its comments, tags and categories.

    Deleting a post that does not exist succeeds. Requires the operator
    token.

    Raises:
        HTTPException: If not authorized
    """
    try:
        await delete_post_use_case.execute(
            DeletePostRequest(
                post_id=post_id, is_privileged=jwt_service.is_privileged(auth_token)
            )
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete posts",
        )
    except StorageError as e:
        raise _storage_unavailable(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
