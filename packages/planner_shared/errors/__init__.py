"""Public shared error API for Planner services."""

from . import codes
from .factories import (
    internal_error,
    not_found_error,
    validation_error,
)
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "codes",
    "internal_error",
    "not_found_error",
    "validation_error",
]
