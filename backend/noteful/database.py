"""
Noteful Backend — Database Engine & Session Management
========================================================

What:  Async SQLAlchemy engine factory, session factory, and declarative base.
How:   create_engine_for() builds a pooled async engine for PostgreSQL
       (asyncpg) or a single-connection engine for SQLite (aiosqlite).
       The app factory keeps the engine and session factory on app.state;
       nothing here is a process-wide singleton.
Who:   Used by the app factory, the stores, Alembic and the test fixtures.

Connection Pooling Strategy (PostgreSQL):
    pool_size / max_overflow from settings, pool_pre_ping to catch stale
    connections after a database restart, pool_recycle=3600.

SQLite:
    Foreign keys are off by default in SQLite; every new DBAPI connection
    runs PRAGMA foreign_keys=ON so the ON DELETE / ON UPDATE CASCADE clauses
    and the FK check on notes.folder_id are enforced.
    In-memory databases use StaticPool so every session sees the same data.
"""

from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from noteful.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the models, Alembic and the test
    fixtures that call metadata.create_all().
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for(settings: Settings) -> AsyncEngine:
    """
    Build the async engine described by `settings`.

    Args:
        settings: Application settings (database_url, pool options, log_level)

    Returns:
        AsyncEngine ready to hand to session_factory_for()
    """
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}

    if settings.is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in settings.database_url or settings.database_url.endswith("://"):
            options["poolclass"] = StaticPool
        engine = create_async_engine(settings.database_url, **options)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        **options,
    )


def session_factory_for(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `engine`.

    expire_on_commit=False keeps loaded attributes readable after the store
    commits, so entities can be serialized once the transaction is closed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create both tables directly (tests and local SQLite runs; production uses Alembic)."""
    # Imported for their side effect of registering with Base.metadata
    from noteful.models import folder, note  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close every pooled connection (application shutdown)."""
    await engine.dispose()
