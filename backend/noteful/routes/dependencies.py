"""
Noteful Backend — Route Dependencies
======================================

What:  FastAPI dependencies that build the services for each request.
How:   The app factory stores the session factory on app.state; these
       functions read it from the request and wrap it in a store + service.
       Tests get isolation by building a separate app over another engine.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from noteful.services.folder_service import FolderService
from noteful.services.note_service import NoteService
from noteful.stores.folder_store import FolderStore
from noteful.stores.note_store import NoteStore


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_factory


def get_folder_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> FolderService:
    return FolderService(FolderStore(session_factory))


def get_note_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> NoteService:
    return NoteService(NoteStore(session_factory))
