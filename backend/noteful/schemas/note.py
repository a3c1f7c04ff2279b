"""
Noteful Backend — Note Response Schemas
=========================================

What:  Pydantic model describing what the API returns for notes.
"""

from pydantic import BaseModel, Field


class NoteResponse(BaseModel):
    """
    A note as returned by GET/POST /notes.

    time_modified is epoch milliseconds, refreshed on every update.
    """

    id: int = Field(description="Generated note identifier")
    folder_id: int = Field(description="Folder that holds this note")
    name: str = Field(description="Note name (sanitized)")
    content: str = Field(description="Note body (sanitized)")
    time_modified: int = Field(description="Last modification time, epoch milliseconds")

    model_config = {"from_attributes": True}
