"""
Noteful Backend — Folder Service
==================================

What:  ResourceService bound to the folders table.
How:   Wraps a FolderStore; deleting through this service removes the
       folder's notes as part of the same store transaction.
"""

from noteful.models.fields import FOLDER_FIELDS
from noteful.schemas.folder import FolderResponse
from noteful.services.resource_service import ResourceService
from noteful.stores.folder_store import FolderStore


class FolderService(ResourceService[FolderResponse, FolderStore]):
    fields = FOLDER_FIELDS
    response_model = FolderResponse
