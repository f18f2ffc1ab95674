"""Domain layer DI providers."""

from dishka import Scope, provide

from miniblog.config import AuthSettings
from miniblog.domain.repository import FileStore, PostRepository
from miniblog.domain.service import (
    FileService,
    JWTService,
    PostQueryService,
    PostService,
)
from miniblog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_query_service(
        self, post_repository: PostRepository
    ) -> PostQueryService:
        """Provide post query domain service."""
        return PostQueryService(post_repository=post_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_file_service(self, file_store: FileStore) -> FileService:
        """Provide file domain service."""
        return FileService(file_store=file_store)
