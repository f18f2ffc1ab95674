"""PostgreSQL implementation of the blob store."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from miniblog.domain.error import NotSupportedError, StorageError
from miniblog.domain.repository.file import FileStore
from miniblog.persistence.tables import files_table


class PostgresFileStore(FileStore):
    """Serves files from the files table.

    Uploading is not implemented, so ``store`` always fails.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def store(self, content: bytes, file_name: str) -> str:
        """Reject storing a file."""
        logfire.warn("File storage is not supported", file_name=file_name)
        raise NotSupportedError("Storing files")

    async def retrieve(self, stored_name: str) -> Optional[bytes]:
        """Find a file by its exact name."""
        with logfire.span("file_store.retrieve", file_name=stored_name):
            try:
                stmt = (
                    select(files_table.c.content)
                    .where(files_table.c.file_name == stored_name)
                    .limit(1)
                )
                content = (await self.session.execute(stmt)).scalar_one_or_none()
            except SQLAlchemyError as e:
                raise StorageError("retrieve", str(e)) from e

            if content is None:
                logfire.warn("File not found", file_name=stored_name)
                return None
            return bytes(content)
