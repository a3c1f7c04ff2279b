# Models package init
"""
Noteful Backend — ORM Models
==============================

Importing the package registers both tables with Base.metadata, which
create_schema() and Alembic autogenerate rely on.
"""

from noteful.models.folder import Folder
from noteful.models.note import Note

__all__ = ["Folder", "Note"]
