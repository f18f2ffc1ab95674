"""Get file use case."""

from typing import Optional

from pydantic import BaseModel

from miniblog.domain.service import FileService


class GetFileRequest(BaseModel):
    """Get file request."""

    file_name: str


class GetFileUseCase:
    """Use case for reading an uploaded file."""

    def __init__(self, file_service: FileService) -> None:
        self.file_service = file_service

    async def execute(self, request: GetFileRequest) -> Optional[bytes]:
        """Execute get file flow.

        Returns:
            File bytes if found, None otherwise

        Raises:
            StorageError: If the blob store fails
        """
        return await self.file_service.get_file(request.file_name)
