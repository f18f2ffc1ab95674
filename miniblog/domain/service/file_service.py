"""File domain service."""

import re
from pathlib import PurePosixPath
from typing import Optional

import logfire

from miniblog.domain.error import InvalidArgumentError
from miniblog.domain.repository import FileStore

from .base import Service


class FileService(Service):
    """Domain service for files embedded in post content."""

    def __init__(self, file_store: FileStore) -> None:
        """Initialize file service.

        Args:
            file_store: Blob store
        """
        self.file_store = file_store

    async def save_file(
        self, content: bytes, file_name: str, suffix: Optional[str] = None
    ) -> str:
        """Store a file under a sanitized name.

        Args:
            content: Raw file bytes
            file_name: Name supplied by the uploader
            suffix: Optional marker inserted before the extension

        Returns:
            Name under which the file was stored

        Raises:
            InvalidArgumentError: If the file name is empty
            NotSupportedError: If the blob store cannot store files
        """
        stored_name = self.build_file_name(file_name, suffix)
        with logfire.span(
            "file_service.save_file", file_name=stored_name, size=len(content)
        ):
            name = await self.file_store.store(content, stored_name)
            logfire.info("File stored", file_name=name)
            return name

    async def get_file(self, stored_name: str) -> Optional[bytes]:
        """Read a stored file.

        Args:
            stored_name: Exact name of the file

        Returns:
            File bytes if found, None otherwise

        Raises:
            StorageError: If the blob store fails
        """
        with logfire.span("file_service.get_file", file_name=stored_name):
            return await self.file_store.retrieve(stored_name)

    @staticmethod
    def build_file_name(file_name: str, suffix: Optional[str] = None) -> str:
        """Build the stored name for an upload.

        - Drops any directory part
        - Replaces characters outside ``[A-Za-z0-9._-]`` with hyphens
        - Inserts the suffix between the stem and the extension

        Args:
            file_name: Name supplied by the uploader
            suffix: Optional marker inserted before the extension

        Returns:
            Sanitized file name
        """
        name = PurePosixPath(file_name.replace("\\", "/")).name
        name = re.sub(r"[^A-Za-z0-9._-]+", "-", name).strip("-")
        if not name:
            raise InvalidArgumentError("file_name", "must not be empty")

        path = PurePosixPath(name)
        return f"{path.stem}{suffix or ''}{path.suffix}"
