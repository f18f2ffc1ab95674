"""Post use cases."""

from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .save_post import SavePostRequest, SavePostResponse, SavePostUseCase

__all__ = [
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "SavePostRequest",
    "SavePostResponse",
    "SavePostUseCase",
]
