# Services package init
"""
Noteful Backend — Services Layer
==================================

What:  Business logic between the routes (HTTP) and the stores (persistence).

Service Inventory:
    - sanitizer:        bleach-based markup neutralization for text fields
    - validator:        create / partial-update field rules and id parsing
    - ResourceService:  validate → sanitize → store → sanitize-on-read
    - FolderService / NoteService: ResourceService bound to one entity

Services never see a request object; routes hand them parsed JSON and
turn their exceptions into status codes through the global handlers.
"""
