"""Failure values carried by service envelopes.

``ErrorCategory`` decides the HTTP status a failure is rendered with; the
status itself is only chosen in ``planner_shared.http.server``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """Kind of failure a service can report."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """One failed check or store call: stable ``code`` plus a wire ``message``.

    ``metadata`` holds identifiers and store diagnostics for logs; it never
    reaches the response body.
    """

    code: str
    message: str
    category: ErrorCategory
    metadata: Mapping[str, str] = field(default_factory=dict)
