"""
Noteful Backend — Application Package
=======================================

Layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP status codes and headers
    ├─────────────────────────────────────┤
    │   Services (validate / sanitize)    │  ← ResourceService per entity
    ├─────────────────────────────────────┤
    │      Stores (one txn per call)      │  ← FolderStore, NoteStore
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
