"""
Noteful Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own in-memory SQLite database (aiosqlite +
       StaticPool, foreign keys on), so tests never share rows.

Fixture Hierarchy (all function-scoped):
    test_settings
    └── engine                 fresh in-memory database with both tables
        └── session_factory
            ├── folder_store / note_store
            │   └── folder_service / note_service
            └── app → test_client   HTTPX AsyncClient over ASGITransport
"""

import os

# Must be set before noteful.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from noteful.config import Settings
from noteful.database import (
    create_engine_for,
    create_schema,
    dispose_engine,
    session_factory_for,
)
from noteful.main import create_app
from noteful.services.folder_service import FolderService
from noteful.services.note_service import NoteService
from noteful.stores.folder_store import FolderStore
from noteful.stores.note_store import NoteStore


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        log_level="WARNING",
        api_prefix="",
    )


@pytest_asyncio.fixture
async def engine(test_settings):
    """A fresh in-memory database with the folders and notes tables."""
    engine = create_engine_for(test_settings)
    await create_schema(engine)
    yield engine
    await dispose_engine(engine)


@pytest.fixture
def session_factory(engine):
    return session_factory_for(engine)


@pytest.fixture
def folder_store(session_factory) -> FolderStore:
    return FolderStore(session_factory)


@pytest.fixture
def note_store(session_factory) -> NoteStore:
    return NoteStore(session_factory)


@pytest.fixture
def folder_service(folder_store) -> FolderService:
    return FolderService(folder_store)


@pytest.fixture
def note_service(note_store) -> NoteService:
    return NoteService(note_store)


@pytest.fixture
def app(test_settings, engine):
    return create_app(test_settings, engine=engine)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient wired straight into the ASGI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/folders")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def folders_array():
    return [
        {"id": 1, "name": "Important"},
        {"id": 2, "name": "Super"},
        {"id": 3, "name": "Spangley"},
    ]


@pytest.fixture
def malicious_note():
    """A row as an attacker might write it straight into the table."""
    return {
        "id": 911,
        "folder_id": 1,
        "name": 'Naughty <script>alert("xss");</script>',
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
        "time_modified": 1_700_000_000_000,
    }


@pytest.fixture
def seed(session_factory):
    """
    Insert rows directly, bypassing the services (and their sanitizer).

    Usage:
        await seed(folders=[{"id": 1, "name": "A"}], notes=[...])
    """
    from noteful.models.folder import Folder
    from noteful.models.note import Note

    async def _seed(folders=(), notes=()):
        async with session_factory.begin() as session:
            session.add_all(Folder(**row) for row in folders)
            await session.flush()
            session.add_all(Note(**row) for row in notes)

    return _seed
