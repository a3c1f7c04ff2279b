"""
Noteful Backend — Note SQLAlchemy Model
=========================================

What:  ORM model for the `notes` table.
How:   folder_id is a NOT NULL foreign key to folders.id with
       ON UPDATE CASCADE and ON DELETE CASCADE, so the database keeps every
       note attached to a live folder.
Who:   Used by NoteStore and by Alembic for schema management.

Table Design:
    - time_modified: BIGINT epoch milliseconds, written by the store on
      insert and on every update (never earlier than the previous value)
    - idx_notes_folder_id: cascades and per-folder lookups scan by folder_id
"""

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.fields import NOTE_FIELDS


class Note(Base):
    """
    A named piece of free text that lives in exactly one folder.

    Lifecycle:
        1. Created with folder_id, name and content
        2. Partially updated (name, content, folder_id); time_modified refreshed
        3. Deleted directly, or by the cascade when its folder is deleted
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("folders.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(
        String(NOTE_FIELDS.max_length("name")),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    time_modified: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"time_modified={self.time_modified})>"
        )
