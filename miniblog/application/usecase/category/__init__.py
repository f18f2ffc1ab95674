"""Category use cases."""

from .list_categories import (
    ListCategoriesRequest,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

__all__ = [
    "ListCategoriesRequest",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
]
