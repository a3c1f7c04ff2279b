"""
Noteful Backend — Request Validator
=====================================

What:  Field rules for create and partial-update bodies, plus id parsing.
How:   Driven entirely by the EntityFields tables in noteful.models.fields,
       so the "required" list here and the NOT NULL columns never drift.
Who:   Called by the resource services before anything touches the store.

Rules:
    Create:         every required field present and non-empty, checked in
                    the table's order; the first gap is reported.
    Partial update: at least one mutable field present; unknown fields are
                    dropped silently; a supplied field must not be empty.
    Text fields:    name/content must be JSON strings, checked before any
                    store call so a bad type never reaches the database.
    Ids:           positive integers only; anything else reads as "not found".
"""

from typing import Any, Dict, Optional

from noteful.exceptions import ValidationError
from noteful.models.fields import EntityFields


def is_blank(value: Any) -> bool:
    """None, '' and whitespace-only strings count as missing."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def validate_create(entity: EntityFields, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a create body and keep only the declared fields.

    Raises:
        ValidationError: "Missing '<field>' in request body" for the first
            required field that is absent or blank
    """
    for name in entity.required:
        if is_blank(body.get(name)):
            raise ValidationError.missing_field(name)
    values = {name: body[name] for name in entity.required}
    _require_text(entity, values)
    return values


def validate_partial_update(entity: EntityFields, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a partial-update body and keep only the mutable fields it supplies.

    Raises:
        ValidationError: when none of the mutable fields is present, or a
            supplied one is blank
    """
    supplied = {name: body[name] for name in entity.mutable if name in body}
    if not supplied:
        raise ValidationError(
            message=f"Request body must content either {_either(entity.mutable)}",
            context={"allowed_fields": list(entity.mutable)},
        )
    for name, value in supplied.items():
        if is_blank(value):
            raise ValidationError.missing_field(name)
    _require_text(entity, supplied)
    return supplied


def validate_lengths(entity: EntityFields, fields: Dict[str, Any]) -> None:
    """
    Enforce the column length limits on already-sanitized values.

    Escaping can lengthen text, so this runs after the sanitizer.
    """
    for name, limit in entity.max_lengths.items():
        value = fields.get(name)
        if isinstance(value, str) and len(value) > limit:
            raise ValidationError(
                message=f"'{name}' must be at most {limit} characters",
                field=name,
                context={"length": len(value)},
            )


def parse_id(raw: Any) -> Optional[int]:
    """
    Parse an entity id, returning None for anything that is not a positive int.

    Accepts ints and strings of ASCII digits ("12"); rejects bools, signs,
    whitespace, decimals and zero.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if isinstance(raw, str) and raw.isascii() and raw.isdigit():
        value = int(raw)
        return value if value > 0 else None
    return None


def _require_text(entity: EntityFields, values: Dict[str, Any]) -> None:
    """Text columns only take JSON strings; 123, true or ["x"] are rejected."""
    for name in entity.text:
        if name in values and not isinstance(values[name], str):
            raise ValidationError(
                message=f"'{name}' must be a string",
                field=name,
                context={"type": type(values[name]).__name__},
            )


def _either(fields) -> str:
    quoted = [f"'{name}'" for name in fields]
    if len(quoted) == 1:
        return quoted[0]
    return ", ".join(quoted[:-1]) + " or " + quoted[-1]
