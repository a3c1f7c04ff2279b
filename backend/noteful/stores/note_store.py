"""
Noteful Backend — Note Store
==============================

What:  Persistence operations for notes.
How:   Same one-transaction-per-call shape as FolderStore, plus two extras:
       - the referenced folder is looked up inside the write transaction
         (the FK constraint is the final word, mapped to ConstraintError)
       - time_modified is stamped on insert and on every update, never
         moving backwards even if the wall clock does
"""

import logging
import time
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import ConstraintError
from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.services.validator import parse_id
from noteful.stores.base import BaseStore

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class NoteStore(BaseStore):
    """Row operations on the `notes` table."""

    entity = "note"

    async def list(self) -> List[Note]:
        """All notes, id ascending. An empty table gives an empty list."""
        async with self.transaction("list") as session:
            result = await session.execute(select(Note).order_by(Note.id))
            return list(result.scalars().all())

    async def get_by_id(self, note_id: int) -> Optional[Note]:
        async with self.transaction("get") as session:
            return await session.get(Note, note_id)

    async def insert(self, fields: Dict[str, Any]) -> Note:
        """
        Insert a note stamped with the current time.

        Raises:
            ConstraintError: folder_id does not reference an existing folder
        """
        folder_id = self._folder_ref(fields["folder_id"])
        async with self.transaction("insert") as session:
            await self._require_folder(session, folder_id)
            note = Note(
                folder_id=folder_id,
                name=fields["name"],
                content=fields["content"],
                time_modified=now_ms(),
            )
            session.add(note)
            await session.flush()  # assigns note.id
        logger.info("Note %s created in folder %s", note.id, folder_id)
        return note

    async def update_by_id(self, note_id: int, fields: Dict[str, Any]) -> Optional[Note]:
        """
        Apply `fields` to one note and refresh its time_modified.

        Returns:
            The updated note, or None when no note has that id

        Raises:
            ConstraintError: folder_id is being changed to a missing folder
        """
        new_folder_id = None
        if "folder_id" in fields:
            new_folder_id = self._folder_ref(fields["folder_id"])

        async with self.transaction("update") as session:
            note = await session.get(Note, note_id, with_for_update=True)
            if note is None:
                return None
            if new_folder_id is not None:
                await self._require_folder(session, new_folder_id)
                note.folder_id = new_folder_id
            if "name" in fields:
                note.name = fields["name"]
            if "content" in fields:
                note.content = fields["content"]
            note.time_modified = max(now_ms(), note.time_modified)
            await session.flush()
        logger.info("Note %s updated (%s)", note_id, ", ".join(sorted(fields)))
        return note

    async def delete_by_id(self, note_id: int) -> bool:
        """Returns True when the note existed and is gone, False otherwise."""
        async with self.transaction("delete") as session:
            result = await session.execute(delete(Note).where(Note.id == note_id))
            deleted = result.rowcount > 0
        if deleted:
            logger.info("Note %s deleted", note_id)
        return deleted

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _folder_ref(raw: Any) -> int:
        folder_id = parse_id(raw)
        if folder_id is None:
            raise ConstraintError(context={"folder_id": str(raw)})
        return folder_id

    @staticmethod
    async def _require_folder(session: AsyncSession, folder_id: int) -> None:
        result = await session.execute(select(Folder.id).where(Folder.id == folder_id))
        if result.scalar_one_or_none() is None:
            raise ConstraintError(context={"folder_id": folder_id})
