"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from miniblog.domain.repository.file import FileStore
from miniblog.domain.repository.post import PostCriteria, PostRepository

__all__ = [
    "FileStore",
    "PostCriteria",
    "PostRepository",
]
