"""Store contracts shared by the Supabase substrate and its callers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

Row = dict[str, Any]


@dataclass(frozen=True)
class StoreError:
    """Error reported by the remote store for one call."""

    message: str
    code: str = ""
    details: str = ""
    hint: str = ""


@dataclass(frozen=True)
class StoreResult:
    """Outcome of one store call: returned rows, or an error."""

    data: list[Row] = field(default_factory=list)
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the call reported no error."""
        return self.error is None

    @property
    def first(self) -> Row | None:
        """Return the first returned row, if any."""
        return self.data[0] if self.data else None


class StoreClient(Protocol):
    """Protocol for table-level CRUD against the remote store.

    Filters are equality matches keyed by column name. Every call reports
    failure through ``StoreResult.error`` instead of raising.
    """

    def select(
        self,
        *,
        table: str,
        columns: str = "*",
        filters: Mapping[str, object] | None = None,
    ) -> StoreResult:
        """Select rows from one table."""

    def insert(self, *, table: str, row: Mapping[str, object], columns: str = "*") -> StoreResult:
        """Insert one row and return the stored representation."""

    def update(
        self,
        *,
        table: str,
        values: Mapping[str, object],
        filters: Mapping[str, object],
        columns: str = "*",
    ) -> StoreResult:
        """Update matching rows and return their stored representation."""

    def delete(self, *, table: str, filters: Mapping[str, object]) -> StoreResult:
        """Delete matching rows."""

    def close(self) -> None:
        """Release transport resources."""


def embed_columns(alias: str, table: str) -> str:
    """Return a column selector embedding every row of one related table.

    ``embed_columns("tasks", "task")`` selects ``*,tasks:task(*)``.
    """
    return f"*,{alias}:{table}(*)"
