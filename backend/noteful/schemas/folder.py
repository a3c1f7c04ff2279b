"""
Noteful Backend — Folder Response Schemas
===========================================

What:  Pydantic models describing what the API returns for folders.
How:   Built from ORM rows with from_attributes; request bodies are plain
       JSON objects checked by the validator, not by Pydantic, so missing
       fields answer 400 with the documented message instead of a 422.
"""

from pydantic import BaseModel, Field


class FolderResponse(BaseModel):
    """A folder as returned by GET/POST /folders."""

    id: int = Field(description="Generated folder identifier")
    name: str = Field(description="Folder name (sanitized)")

    model_config = {"from_attributes": True}
