"""Repository implementations."""

from miniblog.persistence.repository.file import PostgresFileStore
from miniblog.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresFileStore",
    "PostgresPostRepository",
]
