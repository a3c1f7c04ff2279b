"""
Noteful Backend — Note Service
================================

What:  ResourceService bound to the notes table.
How:   Wraps a NoteStore. name and content are sanitized on the way in and
       on the way out; folder_id is passed to the store, which rejects
       references to folders that do not exist (ConstraintError).
"""

from noteful.models.fields import NOTE_FIELDS
from noteful.schemas.note import NoteResponse
from noteful.services.resource_service import ResourceService
from noteful.stores.note_store import NoteStore


class NoteService(ResourceService[NoteResponse, NoteStore]):
    fields = NOTE_FIELDS
    response_model = NoteResponse
