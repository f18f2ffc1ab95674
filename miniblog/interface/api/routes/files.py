"""File routes.

Files referenced from post content are served from the blob store. Uploads
are not implemented and answer 501.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status

from miniblog.application.usecase.file import (
    GetFileRequest,
    GetFileUseCase,
    SaveFileRequest,
    SaveFileResponse,
    SaveFileUseCase,
)
from miniblog.domain.error import (
    InvalidArgumentError,
    NotSupportedError,
    StorageError,
)

router = APIRouter(prefix="/files", tags=["files"], route_class=DishkaRoute)


def _not_implemented(e: NotSupportedError) -> HTTPException:
    logfire.warn("File storage not supported", error=str(e))
    return HTTPException(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        detail=str(e),
    )


@router.post(
    "",
    response_model=SaveFileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_file(
    request: Request,
    file_name: str,
    save_file_use_case: FromDishka[SaveFileUseCase],
    suffix: str | None = None,
) -> SaveFileResponse:
    """Upload a file referenced from post content.

    The request body holds the raw file bytes.

    Args:
        request: Incoming request
        file_name: Name supplied by the uploader
        save_file_use_case: Save file use case from DI
        suffix: Optional marker inserted before the extension

    Returns:
        Name under which the file was stored

    Raises:
        HTTPException: 501 because uploads are not implemented
    """
    content = await request.body()
    try:
        return await save_file_use_case.execute(
            SaveFileRequest(content=content, file_name=file_name, suffix=suffix)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotSupportedError as e:
        raise _not_implemented(e)


@router.get("/{name}")
async def get_file(
    name: str,
    get_file_use_case: FromDishka[GetFileUseCase],
) -> Response:
    """Download a file referenced from post content.

    The name must match the stored file name exactly.

    Raises:
        HTTPException: 404 if missing, 503 if the blob store fails
    """
    try:
        content = await get_file_use_case.execute(GetFileRequest(file_name=name))
    except StorageError as e:
        logfire.error("Storage failure", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="File storage is unavailable",
        )

    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="File not found",
        )
    return Response(content=content, media_type="application/octet-stream")
