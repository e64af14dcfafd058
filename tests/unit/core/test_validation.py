"""
Unit Tests for Payload Validation.

The same validator runs against both note input schemas.
"""

import pytest

from notes_api.core.exceptions import DecodeError, ValidationError
from notes_api.core.validation import Violation, parse_payload, validate_payload
from notes_api.schemas.note import NoteCreate, NoteUpdate


class TestValidatePayload:
    """Tests for validate_payload."""

    def test_valid_create_payload_has_no_violations(self):
        """Should return an empty list for a valid payload."""
        assert validate_payload(NoteCreate, {"title": "T", "content": "C"}) == []

    def test_missing_fields_are_required(self):
        """Should report missing required fields as 'required'."""
        violations = validate_payload(NoteCreate, {})

        assert violations == [
            Violation(field="NoteCreate.title", tag="required"),
            Violation(field="NoteCreate.content", tag="required"),
        ]

    def test_empty_required_string_is_required(self):
        """Should report an empty required string like a missing one."""
        violations = validate_payload(NoteCreate, {"title": "", "content": "C"})

        assert violations == [Violation(field="NoteCreate.title", tag="required")]

    def test_max_length_carries_parameter(self):
        """Should include the rule parameter in the violation."""
        violations = validate_payload(
            NoteCreate, {"title": "T", "content": "C", "category": "c" * 101}
        )

        assert violations == [
            Violation(field="NoteCreate.category", tag="max_length", value="100")
        ]

    def test_type_errors_keep_pydantic_rule_name(self):
        """Should fall back to the underlying type rule name."""
        violations = validate_payload(NoteCreate, {"title": 12, "content": "C"})

        assert violations[0].field == "NoteCreate.title"
        assert violations[0].tag == "string_type"
        assert violations[0].value is None

    def test_update_schema_accepts_empty_payload(self):
        """Should treat every update field as optional."""
        assert validate_payload(NoteUpdate, {}) == []

    def test_update_schema_reports_its_own_name(self):
        """Should qualify fields with the schema being validated."""
        violations = validate_payload(NoteUpdate, {"title": "x" * 300})

        assert violations == [
            Violation(field="NoteUpdate.title", tag="max_length", value="255")
        ]

    def test_empty_string_on_optional_field_is_allowed(self):
        """Empty optional strings are not 'required' violations."""
        assert validate_payload(NoteUpdate, {"title": ""}) == []


class TestParsePayload:
    """Tests for parse_payload."""

    def test_returns_schema_instance(self):
        """Should build the schema from a valid payload."""
        data = parse_payload(NoteCreate, {"title": "T", "content": "C"})

        assert isinstance(data, NoteCreate)
        assert data.published is False

    def test_raises_validation_error_with_violations(self):
        """Should raise ValidationError listing every violation."""
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(NoteCreate, {"content": ""})

        fields = [v.field for v in exc_info.value.violations]
        assert fields == ["NoteCreate.title", "NoteCreate.content"]

    @pytest.mark.parametrize("payload", [None, [], "text", 3])
    def test_non_object_payload_is_decode_error(self, payload):
        """Should raise DecodeError when the body is not a JSON object."""
        with pytest.raises(DecodeError):
            parse_payload(NoteCreate, payload)
