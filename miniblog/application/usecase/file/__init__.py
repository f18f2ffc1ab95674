"""File use cases."""

from .get_file import GetFileRequest, GetFileUseCase
from .save_file import SaveFileRequest, SaveFileResponse, SaveFileUseCase

__all__ = [
    "GetFileRequest",
    "GetFileUseCase",
    "SaveFileRequest",
    "SaveFileResponse",
    "SaveFileUseCase",
]
