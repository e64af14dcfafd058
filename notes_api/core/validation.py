"""
Payload Validation.

Evaluates the field rules declared on a Pydantic schema against a decoded
request payload and reports every failure as a Violation. The same two
functions serve every input schema; the rules live on the schema's Field
declarations, not here.

Usage:
    from notes_api.core.validation import parse_payload, validate_payload

    violations = validate_payload(NoteCreate, {"content": "x"})
    # [Violation(field="NoteCreate.title", tag="required", value=None)]

    data = parse_payload(NoteCreate, body)  # raises ValidationError
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from notes_api.core.exceptions import DecodeError, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Pydantic error types renamed to the rule names reported to clients
RULE_TAGS: dict[str, str] = {
    "missing": "required",
    "string_too_short": "min_length",
    "string_too_long": "max_length",
    "greater_than_equal": "ge",
    "less_than_equal": "le",
}

# Context keys that carry the parameter of the failed rule
RULE_PARAMS = ("min_length", "max_length", "ge", "le")


class Violation(BaseModel):
    """A single failed rule on a single field."""

    field: str
    tag: str
    value: str | None = None

    model_config = ConfigDict(frozen=True)


def _field_path(schema_cls: type[BaseModel], loc: tuple[int | str, ...]) -> str:
    return ".".join([schema_cls.__name__, *(str(part) for part in loc)])


def _is_required(schema_cls: type[BaseModel], loc: tuple[int | str, ...]) -> bool:
    if len(loc) != 1:
        return False
    field = schema_cls.model_fields.get(str(loc[0]))
    return field is not None and field.is_required()


def _to_violation(schema_cls: type[BaseModel], error: ErrorDetails) -> Violation:
    loc = tuple(error.get("loc", ()))
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    # An empty string on a required text field is reported the same as a
    # missing one.
    if (
        error_type == "string_too_short"
        and ctx.get("min_length") == 1
        and _is_required(schema_cls, loc)
    ):
        return Violation(field=_field_path(schema_cls, loc), tag="required")

    param = next((ctx[key] for key in RULE_PARAMS if key in ctx), None)
    return Violation(
        field=_field_path(schema_cls, loc),
        tag=RULE_TAGS.get(error_type, error_type),
        value=str(param) if param is not None else None,
    )


def violations_from_error(
    schema_cls: type[BaseModel],
    exc: PydanticValidationError,
) -> list[Violation]:
    """Convert a Pydantic ValidationError into ordered violations."""
    return [_to_violation(schema_cls, error) for error in exc.errors()]


def validate_payload(schema_cls: type[SchemaT], payload: Any) -> list[Violation]:
    """
    Check a payload against a schema's declared rules.

    Args:
        schema_cls: Input schema whose Field constraints define the rules
        payload: Decoded request body

    Returns:
        Violations in field declaration order, empty when the payload is valid
    """
    try:
        schema_cls.model_validate(payload)
    except PydanticValidationError as exc:
        return violations_from_error(schema_cls, exc)
    return []


def parse_payload(schema_cls: type[SchemaT], payload: Any) -> SchemaT:
    """
    Build a schema instance from a payload, enforcing its rules.

    Args:
        schema_cls: Input schema to build
        payload: Decoded request body

    Returns:
        Validated schema instance

    Raises:
        DecodeError: If the payload is not a JSON object
        ValidationError: If any field rule fails
    """
    if not isinstance(payload, dict):
        raise DecodeError("Request body must be a JSON object")

    try:
        return schema_cls.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            "Validation failed",
            violations=violations_from_error(schema_cls, exc),
        ) from exc
