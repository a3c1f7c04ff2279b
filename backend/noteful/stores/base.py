"""
Noteful Backend — Store Transaction Helper
============================================

What:  Shared transaction scope for FolderStore and NoteStore.
How:   transaction() opens a session with session_factory.begin(): commit on
       clean exit, rollback on any exception (including task cancellation),
       session closed either way. SQLAlchemy errors are translated into the
       application's exception types on the way out.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from noteful.exceptions import ConstraintError, DatabaseError

logger = logging.getLogger(__name__)


class BaseStore:
    """Holds the session factory and provides the per-operation transaction."""

    entity = "entity"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """
        One atomic unit of work.

        Raises:
            ConstraintError: the database rejected a foreign key (or other
                integrity) check; nothing was written
            DatabaseError: any other SQLAlchemy failure; nothing was written
        """
        try:
            async with self._session_factory.begin() as session:
                yield session
        except IntegrityError as e:
            logger.warning(
                "Integrity error during %s %s: %s", self.entity, operation, e.orig
            )
            raise ConstraintError(
                context={"operation": operation, "entity": self.entity}
            ) from e
        except SQLAlchemyError as e:
            logger.error(
                "Database error during %s %s: %s",
                self.entity,
                operation,
                str(e),
                exc_info=True,
            )
            raise DatabaseError(
                context={
                    "operation": operation,
                    "entity": self.entity,
                    "error_type": type(e).__name__,
                }
            ) from e
