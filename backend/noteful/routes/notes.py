"""
Noteful Backend — Note Route Handlers
=======================================

What:  CRUD endpoints for notes; mirrors routes/folders.py.
How:   POST expects {"folder_id", "name", "content"}; PATCH accepts any
       non-empty subset of those. A folder_id that matches no folder
       answers 400 "Referenced folder doesn't exist".
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from noteful.routes.dependencies import get_note_service
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteResponse
from noteful.services.note_service import NoteService

router = APIRouter(prefix="/notes", tags=["Notes"])

NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
BAD_REQUEST = {
    400: {
        "description": "Invalid request body or unknown folder_id",
        "model": ErrorResponse,
    }
}


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return await service.list()


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses=NOT_FOUND,
    summary="Get a single note by id",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.get(note_id)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a note inside an existing folder",
)
async def create_note(
    request: Request,
    response: Response,
    body: Any = Body(default=None),
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = await service.create(body)
    prefix = request.app.state.settings.api_prefix
    response.headers["Location"] = f"{prefix}/notes/{note.id}"
    return note


@router.patch(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Partially update a note",
)
async def update_note(
    note_id: str,
    body: Any = Body(default=None),
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.update(note_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.delete(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
