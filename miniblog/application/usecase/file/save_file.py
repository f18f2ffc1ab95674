"""Save file use case."""

from pydantic import BaseModel

from miniblog.domain.service import FileService


class SaveFileRequest(BaseModel):
    """Save file request."""

    content: bytes
    file_name: str
    suffix: str | None = None


class SaveFileResponse(BaseModel):
    """Save file response."""

    file_name: str


class SaveFileUseCase:
    """Use case for uploading a file referenced from post content."""

    def __init__(self, file_service: FileService) -> None:
        """Initialize save file use case.

        Args:
            file_service: File domain service
        """
        self.file_service = file_service

    async def execute(self, request: SaveFileRequest) -> SaveFileResponse:
        """Execute save file flow.

        Args:
            request: Save file request

        Returns:
            Name under which the file was stored

        Raises:
            NotSupportedError: Uploads are not implemented
        """
        name = await self.file_service.save_file(
            request.content, request.file_name, request.suffix
        )
        return SaveFileResponse(file_name=name)
