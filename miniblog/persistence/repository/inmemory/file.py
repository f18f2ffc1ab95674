"""In-memory blob store for testing."""

from typing import Optional

from miniblog.domain.error import NotSupportedError
from miniblog.domain.repository.file import FileStore


class InMemoryFileStore(FileStore):
    """In-memory implementation of FileStore for testing.

    Mirrors the PostgreSQL store: files can be read but not uploaded.
    Tests seed content with ``put``.
    """

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def put(self, file_name: str, content: bytes) -> None:
        """Seed a file."""
        self._files[file_name] = content

    async def store(self, content: bytes, file_name: str) -> str:
        """Reject storing a file."""
        raise NotSupportedError("Storing files")

    async def retrieve(self, stored_name: str) -> Optional[bytes]:
        """Find a file by its exact name."""
        return self._files.get(stored_name)
