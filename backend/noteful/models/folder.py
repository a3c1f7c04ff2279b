"""
Noteful Backend — Folder SQLAlchemy Model
===========================================

What:  ORM model for the `folders` table.
How:   Integer surrogate key; sqlite_autoincrement so SQLite never hands out
       a deleted id again (PostgreSQL SERIAL sequences never do).
Who:   Used by FolderStore and NoteStore, and by Alembic for schema management.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.fields import FOLDER_FIELDS


class Folder(Base):
    """
    A named container of notes.

    Lifecycle:
        1. Created with a name
        2. Renamed through partial updates
        3. Deleted together with every note it holds
    """

    __tablename__ = "folders"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(FOLDER_FIELDS.max_length("name")),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
