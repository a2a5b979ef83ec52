"""Per-operation message catalog primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationMessages:
    """Fixed human-readable messages for one entity operation."""

    success: str
    error: str
    not_found: str = ""
    data_found: str = ""
