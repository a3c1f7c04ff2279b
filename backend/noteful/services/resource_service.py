"""
Noteful Backend — Resource Service (Business Logic Orchestrator)
==================================================================

What:  Shared create/get/list/update/delete workflow for folders and notes.
How:   Composes the validator, the sanitizer and a store. Subclasses only
       declare which field table, store type and response model they use.
Who:   Built per request by the route dependencies; the store it wraps is
       passed in explicitly, so tests can point it at any database.

Orchestration Flow:
    create:  validate_create → sanitize → length check → store.insert → view
    get:     parse id → store.get_by_id → view
    list:    store.list → view each
    update:  parse id → existence check → validate_partial_update
             → sanitize → length check → store.update_by_id
    delete:  parse id → store.delete_by_id

    "view" builds the response model and sanitizes its text fields again,
    so rows written by any other path never leave the API unsanitized.

Error precedence on update:
    A missing id answers NotFoundError even when the body is also invalid;
    the existence check runs before field validation.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from noteful.exceptions import NotFoundError, ValidationError
from noteful.models.fields import EntityFields
from noteful.services.sanitizer import sanitize_fields
from noteful.services.validator import (
    parse_id,
    validate_create,
    validate_lengths,
    validate_partial_update,
)
from noteful.stores.base import BaseStore

logger = logging.getLogger(__name__)

ViewT = TypeVar("ViewT", bound=BaseModel)
StoreT = TypeVar("StoreT", bound=BaseStore)

BODY_NOT_OBJECT = "Request body must be a JSON object"


class ResourceService(Generic[ViewT, StoreT]):
    """
    Business logic for one entity type.

    Class attributes set by subclasses:
        fields:         EntityFields table (required/mutable/text/lengths)
        response_model: Pydantic model returned to the routes
    """

    fields: EntityFields
    response_model: Type[ViewT]

    def __init__(self, store: StoreT):
        self.store = store

    # ── Reads ─────────────────────────────────────────────────────────────

    async def list(self) -> List[ViewT]:
        return [self._view(entity) for entity in await self.store.list()]

    async def get(self, raw_id: Any) -> ViewT:
        """
        Raises:
            NotFoundError: unknown id, or an id that is not a positive integer
        """
        entity_id = self._require_id(raw_id)
        entity = await self.store.get_by_id(entity_id)
        if entity is None:
            raise self._not_found(raw_id)
        return self._view(entity)

    # ── Writes ────────────────────────────────────────────────────────────

    async def create(self, body: Any) -> ViewT:
        """
        Validate, sanitize and insert a new entity.

        Raises:
            ValidationError: missing/blank required field, over-long name,
                or a body that is not a JSON object (no store call is made)
            ConstraintError: a note's folder_id matches no folder
        """
        values = validate_create(self.fields, self._as_object(body))
        values = sanitize_fields(values, self.fields.text)
        validate_lengths(self.fields, values)

        entity = await self.store.insert(values)
        return self._view(entity)

    async def update(self, raw_id: Any, body: Any) -> ViewT:
        """
        Partially update an entity with the mutable fields present in `body`.

        Raises:
            NotFoundError: the id does not exist (checked before the body)
            ValidationError: no mutable field supplied, or a blank/over-long one
            ConstraintError: a note is moved to a folder that does not exist
        """
        entity_id = self._require_id(raw_id)
        if await self.store.get_by_id(entity_id) is None:
            raise self._not_found(raw_id)

        values = validate_partial_update(self.fields, self._as_object(body))
        values = sanitize_fields(values, self.fields.text)
        validate_lengths(self.fields, values)

        entity = await self.store.update_by_id(entity_id, values)
        if entity is None:
            # Deleted by a concurrent request between the check and the write
            raise self._not_found(raw_id)
        return self._view(entity)

    async def delete(self, raw_id: Any) -> None:
        entity_id = self._require_id(raw_id)
        if not await self.store.delete_by_id(entity_id):
            raise self._not_found(raw_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    def _view(self, entity) -> ViewT:
        data = self.response_model.model_validate(entity).model_dump()
        return self.response_model(**sanitize_fields(data, self.fields.text))

    def _require_id(self, raw_id: Any) -> int:
        entity_id = parse_id(raw_id)
        if entity_id is None:
            logger.debug("Malformed %s id %r treated as not found", self.fields.label, raw_id)
            raise self._not_found(raw_id)
        return entity_id

    def _not_found(self, raw_id: Any) -> NotFoundError:
        return NotFoundError(resource=self.fields.label, resource_id=raw_id)

    @staticmethod
    def _as_object(body: Optional[Any]) -> dict:
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise ValidationError(message=BODY_NOT_OBJECT)
        return body
