"""
Noteful Backend — Folder Route Handlers
=========================================

What:  CRUD endpoints for folders.
How:   Path ids are taken as strings and parsed by the service, so "abc"
       and "-1" answer 404 like any other unknown id. Bodies are read as
       raw JSON and checked by the validator (400 on bad input, never 422).
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from noteful.routes.dependencies import get_folder_service
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderResponse
from noteful.services.folder_service import FolderService

router = APIRouter(prefix="/folders", tags=["Folders"])

NOT_FOUND = {404: {"description": "Folder not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid request body", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(
    service: FolderService = Depends(get_folder_service),
) -> List[FolderResponse]:
    return await service.list()


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses=NOT_FOUND,
    summary="Get a single folder by id",
)
async def get_folder(
    folder_id: str,
    service: FolderService = Depends(get_folder_service),
) -> FolderResponse:
    return await service.get(folder_id)


@router.post(
    "",
    response_model=FolderResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    body: Any = Body(default=None),
    service: FolderService = Depends(get_folder_service),
) -> FolderResponse:
    """
    Create a folder from {"name": ...}.

    The Location header points at the new folder, under the configured
    API prefix.
    """
    folder = await service.create(body)
    prefix = request.app.state.settings.api_prefix
    response.headers["Location"] = f"{prefix}/folders/{folder.id}"
    return folder


@router.patch(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Rename a folder",
)
async def update_folder(
    folder_id: str,
    body: Any = Body(default=None),
    service: FolderService = Depends(get_folder_service),
) -> Response:
    await service.update(folder_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a folder and all of its notes",
)
async def delete_folder(
    folder_id: str,
    service: FolderService = Depends(get_folder_service),
) -> Response:
    await service.delete(folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
