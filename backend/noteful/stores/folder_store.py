"""
Noteful Backend — Folder Store
================================

What:  Persistence operations for folders.
How:   SQLAlchemy 2.0 select/delete statements, one transaction per call.

Query plans:
    list():          SELECT * FROM folders ORDER BY id
    get_by_id():     primary key lookup
    delete_by_id():  DELETE FROM notes WHERE folder_id = :id;
                     DELETE FROM folders WHERE id = :id   (same transaction)
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select

from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.stores.base import BaseStore

logger = logging.getLogger(__name__)


class FolderStore(BaseStore):
    """Row operations on the `folders` table."""

    entity = "folder"

    async def list(self) -> List[Folder]:
        """All folders, id ascending. An empty table gives an empty list."""
        async with self.transaction("list") as session:
            result = await session.execute(select(Folder).order_by(Folder.id))
            return list(result.scalars().all())

    async def get_by_id(self, folder_id: int) -> Optional[Folder]:
        async with self.transaction("get") as session:
            return await session.get(Folder, folder_id)

    async def insert(self, fields: Dict[str, Any]) -> Folder:
        """Insert a folder and return it with its generated id."""
        async with self.transaction("insert") as session:
            folder = Folder(name=fields["name"])
            session.add(folder)
            await session.flush()  # assigns folder.id
        logger.info("Folder %s created", folder.id)
        return folder

    async def update_by_id(self, folder_id: int, fields: Dict[str, Any]) -> Optional[Folder]:
        """
        Apply `fields` to one folder.

        Returns:
            The updated folder, or None when no folder has that id
        """
        async with self.transaction("update") as session:
            folder = await session.get(Folder, folder_id, with_for_update=True)
            if folder is None:
                return None
            if "name" in fields:
                folder.name = fields["name"]
            await session.flush()
        logger.info("Folder %s updated (%s)", folder_id, ", ".join(sorted(fields)))
        return folder

    async def delete_by_id(self, folder_id: int) -> bool:
        """
        Delete a folder and every note in it as one atomic operation.

        The explicit note delete runs in the same transaction as the folder
        delete, so the cascade holds even on a connection where the database
        would not enforce ON DELETE CASCADE itself.

        Returns:
            True when the folder existed and is gone, False otherwise
        """
        async with self.transaction("delete") as session:
            notes_result = await session.execute(
                delete(Note).where(Note.folder_id == folder_id)
            )
            folder_result = await session.execute(
                delete(Folder).where(Folder.id == folder_id)
            )
            deleted = folder_result.rowcount > 0

        if deleted:
            logger.info(
                "Folder %s deleted along with %d note(s)",
                folder_id,
                notes_result.rowcount,
            )
        return deleted
