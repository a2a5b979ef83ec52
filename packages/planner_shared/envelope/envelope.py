"""Typed response envelope shared by Planner services."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from packages.planner_shared.errors import ErrorDetail


T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Canonical ``{success, message, data}`` envelope with out-of-band errors.

    ``errors`` never reaches the wire body; the HTTP boundary turns a non-empty
    error list into a status code and an error body instead.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    data: T | None = None
    errors: list[ErrorDetail] = Field(default_factory=list, exclude=True)

    @property
    def ok(self) -> bool:
        """Return ``True`` when no errors are present."""
        return len(self.errors) == 0

    def to_body(self) -> dict[str, Any]:
        """Return the JSON-ready wire body."""
        return self.model_dump(mode="json")
