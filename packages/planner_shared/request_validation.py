"""Shared request validation helpers for Planner HTTP-facing services.

Request models are plain pydantic models. ``validate_request`` runs one model
against a decoded payload and converts pydantic errors into per-field
constraint messages in the ``"<field> <constraint>"`` form clients expect.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from packages.planner_shared.errors import ErrorDetail, codes, validation_error

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_INT_ERROR_TYPES = frozenset(
    {"int_type", "int_parsing", "int_from_float", "int_parsing_size"}
)

BODY_FIELD = "body"

TModel = TypeVar("TModel", bound=BaseModel)


@dataclass(frozen=True)
class FieldViolation:
    """All violated constraint messages for one request field."""

    field: str
    constraints: tuple[str, ...]


def is_uuid(value: object) -> bool:
    """Return ``True`` when ``value`` is a hyphenated UUID string."""
    return isinstance(value, str) and _UUID_RE.match(value) is not None


def require_text(value: str) -> str:
    """Reject blank strings."""
    if value.strip() == "":
        raise ValueError("should not be empty")
    return value


def require_uuid(value: str) -> str:
    """Require a hyphenated UUID string."""
    if not is_uuid(value):
        raise ValueError("must be a UUID")
    return value


def require_timestamp(value: str) -> str:
    """Require a non-empty ISO-8601 timestamp; the original text is kept."""
    require_text(value)
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("must be a valid ISO 8601 date string") from None
    return value


def validate_request(
    model: type[TModel], payload: Any
) -> tuple[TModel | None, list[FieldViolation]]:
    """Validate one payload, returning either a request or its violations."""
    if not isinstance(payload, dict):
        return None, [
            FieldViolation(
                field=BODY_FIELD,
                constraints=("request body must be a JSON object",),
            )
        ]

    try:
        return model.model_validate(payload), []
    except ValidationError as exc:
        return None, _violations(model=model, exc=exc)


def violation_errors(violations: Iterable[FieldViolation]) -> list[ErrorDetail]:
    """Convert field violations into validation-category error details."""
    errors: list[ErrorDetail] = []
    for violation in violations:
        for constraint in violation.constraints:
            errors.append(
                validation_error(
                    constraint,
                    code=codes.INVALID_ARGUMENT,
                    metadata={"field": violation.field},
                )
            )
    return errors


def _violations(*, model: type[BaseModel], exc: ValidationError) -> list[FieldViolation]:
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        field = str(loc[0]) if loc else BODY_FIELD
        constraints = grouped.setdefault(field, [])
        for message in _constraint_messages(model=model, field=field, error=error):
            if message not in constraints:
                constraints.append(message)
    return [
        FieldViolation(field=field, constraints=tuple(messages))
        for field, messages in grouped.items()
    ]


def _constraint_messages(
    *, model: type[BaseModel], field: str, error: Any
) -> list[str]:
    """Return the messages for one pydantic error.

    A present but empty value (``""`` or ``null``) reports emptiness and then
    whichever constraint of the field it also broke.
    """
    empty = f"{field} should not be empty"
    if error.get("type") == "missing":
        return [empty]
    message = _constraint_message(model=model, field=field, error=error)
    if error.get("input") in (None, ""):
        return [empty] if message == empty else [empty, message]
    return [message]


def _constraint_message(
    *, model: type[BaseModel], field: str, error: Any
) -> str:
    error_type = error.get("type", "")
    if error_type == "value_error":
        ctx = error.get("ctx") or {}
        return f"{field} {ctx.get('error', error.get('msg', 'is invalid'))}"
    if error_type == "enum":
        allowed = _enum_values(model=model, field=field)
        return f"{field} must be one of the following values: {allowed}"
    if error_type in _INT_ERROR_TYPES:
        return f"{field} must be a number conforming to the specified constraints"
    if error_type == "greater_than":
        return f"{field} must be a positive number"
    if error_type == "string_type":
        return f"{field} must be a string"
    return f"{field} {error.get('msg', 'is invalid')}"


def _enum_values(*, model: type[BaseModel], field: str) -> str:
    for name, info in model.model_fields.items():
        if field not in (name, info.alias):
            continue
        annotation = info.annotation
        if isinstance(annotation, type) and issubclass(annotation, Enum):
            return ", ".join(str(member.value) for member in annotation)
    return ""
