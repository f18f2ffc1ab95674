"""Application layer DI providers."""

from dishka import Scope, provide

from miniblog.application.usecase.category import ListCategoriesUseCase
from miniblog.application.usecase.file import GetFileUseCase, SaveFileUseCase
from miniblog.application.usecase.post import (
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    SavePostUseCase,
)
from miniblog.application.usecase.tag import ListTagsUseCase
from miniblog.domain.service import FileService, PostQueryService, PostService
from miniblog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_query_service: PostQueryService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_query_service=post_query_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_query_service: PostQueryService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_query_service=post_query_service)

    @provide(scope=Scope.REQUEST)
    def get_save_post_use_case(self, post_service: PostService) -> SavePostUseCase:
        """Provide save post use case."""
        return SavePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Tag and category use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, post_query_service: PostQueryService
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(post_query_service=post_query_service)

    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, post_query_service: PostQueryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(post_query_service=post_query_service)

    # File use cases
    @provide(scope=Scope.REQUEST)
    def get_save_file_use_case(self, file_service: FileService) -> SaveFileUseCase:
        """Provide save file use case."""
        return SaveFileUseCase(file_service=file_service)

    @provide(scope=Scope.REQUEST)
    def get_get_file_use_case(self, file_service: FileService) -> GetFileUseCase:
        """Provide get file use case."""
        return GetFileUseCase(file_service=file_service)
