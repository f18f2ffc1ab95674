"""Blob store interface for uploaded files."""

from abc import ABC, abstractmethod
from typing import Optional


class FileStore(ABC):
    """Key/value store for binary assets referenced from post content."""

    @abstractmethod
    async def store(self, content: bytes, file_name: str) -> str:
        """Store a file.

        Args:
            content: Raw file bytes
            file_name: Requested file name

        Returns:
            Name under which the file can be retrieved
        """
        pass

    @abstractmethod
    async def retrieve(self, stored_name: str) -> Optional[bytes]:
        """Retrieve a stored file.

        Args:
            stored_name: Exact name of the file

        Returns:
            File bytes if found, None otherwise
        """
        pass
