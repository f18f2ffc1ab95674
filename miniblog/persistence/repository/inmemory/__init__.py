"""In-memory repository implementations for testing."""

from .file import InMemoryFileStore
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryFileStore",
    "InMemoryPostRepository",
]
