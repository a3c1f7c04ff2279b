"""
Noteful Backend — Per-Entity Field Requirements
=================================================

What:  One declarative table per entity describing its input fields.
How:   EntityFields lists the fields required on create (in the order they
       are checked), the fields a partial update may change, the free-text
       fields that go through the sanitizer, and column length limits.
Who:   Read by the validator, the services (sanitize / length checks) and the
       ORM models (String(length) and NOT NULL columns).
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

NAME_MAX_LENGTH = 50


@dataclass(frozen=True)
class EntityFields:
    label: str
    required: Tuple[str, ...]
    mutable: Tuple[str, ...]
    text: Tuple[str, ...]
    max_lengths: Dict[str, int] = field(default_factory=dict)

    def max_length(self, name: str) -> int:
        return self.max_lengths[name]


FOLDER_FIELDS = EntityFields(
    label="Folder",
    required=("name",),
    mutable=("name",),
    text=("name",),
    max_lengths={"name": NAME_MAX_LENGTH},
)

NOTE_FIELDS = EntityFields(
    label="Note",
    required=("folder_id", "name", "content"),
    mutable=("folder_id", "name", "content"),
    text=("name", "content"),
    max_lengths={"name": NAME_MAX_LENGTH},
)
