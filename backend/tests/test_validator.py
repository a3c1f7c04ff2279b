"""
Noteful Backend — Validator Unit Tests
========================================

What we test:
    ✅ Create: required fields in fixed order, undeclared fields dropped
    ✅ Partial update: at least one mutable field, unknown fields ignored
    ✅ Text fields must be strings
    ✅ Length limits and id parsing
"""

import pytest

from noteful.exceptions import ValidationError
from noteful.models.fields import FOLDER_FIELDS, NOTE_FIELDS
from noteful.services.validator import (
    is_blank,
    parse_id,
    validate_create,
    validate_lengths,
    validate_partial_update,
)


class TestValidateCreate:

    def test_folder_requires_name(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create(FOLDER_FIELDS, {})
        assert exc_info.value.message == "Missing 'name' in request body"
        assert exc_info.value.field == "name"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_counts_as_missing(self, value):
        with pytest.raises(ValidationError):
            validate_create(FOLDER_FIELDS, {"name": value})

    @pytest.mark.parametrize("field", ["folder_id", "name", "content"])
    def test_note_reports_missing_field(self, field):
        body = {"folder_id": 1, "name": "Todo", "content": "Buy milk"}
        del body[field]
        with pytest.raises(ValidationError) as exc_info:
            validate_create(NOTE_FIELDS, body)
        assert exc_info.value.message == f"Missing '{field}' in request body"

    def test_note_reports_first_missing_in_field_order(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create(NOTE_FIELDS, {"content": "x"})
        assert exc_info.value.field == "folder_id"

    def test_undeclared_fields_dropped(self):
        values = validate_create(FOLDER_FIELDS, {"name": "Work", "style": "Listicle", "id": 9})
        assert values == {"name": "Work"}


class TestValidatePartialUpdate:

    def test_empty_body_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_partial_update(FOLDER_FIELDS, {})
        assert exc_info.value.message == "Request body must content either 'name'"

    def test_note_message_lists_all_mutable_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_partial_update(NOTE_FIELDS, {"irrelevantField": "foo"})
        assert exc_info.value.message == (
            "Request body must content either 'folder_id', 'name' or 'content'"
        )

    def test_unknown_fields_ignored(self):
        values = validate_partial_update(
            NOTE_FIELDS, {"name": "x", "fieldToIgnore": "nope", "time_modified": 1}
        )
        assert values == {"name": "x"}

    def test_supplied_field_must_not_be_blank(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_partial_update(NOTE_FIELDS, {"name": None})
        assert exc_info.value.message == "Missing 'name' in request body"


class TestTextFieldTypes:

    @pytest.mark.parametrize("value", [123, 4.5, True, ["x"], {"a": 1}])
    def test_create_rejects_non_string_name(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_create(FOLDER_FIELDS, {"name": value})
        assert exc_info.value.message == "'name' must be a string"
        assert exc_info.value.field == "name"

    def test_create_rejects_non_string_content(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create(NOTE_FIELDS, {"folder_id": 1, "name": "n", "content": 5})
        assert exc_info.value.message == "'content' must be a string"

    def test_update_rejects_non_string_supplied_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_partial_update(NOTE_FIELDS, {"content": ["x"]})
        assert exc_info.value.message == "'content' must be a string"

    def test_folder_id_is_not_a_text_field(self):
        assert validate_partial_update(NOTE_FIELDS, {"folder_id": 3}) == {"folder_id": 3}


class TestLengthsAndIds:

    def test_name_over_limit_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_lengths(FOLDER_FIELDS, {"name": "x" * 51})
        assert exc_info.value.message == "'name' must be at most 50 characters"

    def test_name_at_limit_and_long_content_accepted(self):
        validate_lengths(NOTE_FIELDS, {"name": "x" * 50, "content": "y" * 10_000})

    @pytest.mark.parametrize("raw,expected", [
        ("1", 1), ("42", 42), (7, 7),
        ("0", None), (0, None), (-3, None), ("-3", None), ("abc", None),
        ("1.5", None), (" 1", None), ("", None), (None, None), (True, None), ("１", None),
    ])
    def test_parse_id(self, raw, expected):
        assert parse_id(raw) == expected

    def test_is_blank(self):
        assert is_blank(None) and is_blank("") and is_blank(" \t")
        assert not is_blank(0) and not is_blank("x")
