# Stores package init
"""
Noteful Backend — Persistence Layer
=====================================

What:  Row-level operations on the `folders` and `notes` tables.
How:   Each store wraps an async_sessionmaker; every public method opens its
       own transaction and commits it before returning, so a successful
       write is visible to the very next read.

Store Inventory:
    - FolderStore: list / get_by_id / insert / update_by_id / delete_by_id
                   (delete cascades to the folder's notes in one transaction)
    - NoteStore:   same operations, with folder reference checks and
                   time_modified bookkeeping
"""

from noteful.stores.folder_store import FolderStore
from noteful.stores.note_store import NoteStore

__all__ = ["FolderStore", "NoteStore"]
