"""Pytest configuration and shared fixtures for the Planner test suite."""

from __future__ import annotations

import re
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime

import pytest

from resources.substrates.supabase import Row, StoreError, StoreResult

_EMBED_RE = re.compile(r"(?P<alias>\w+):(?P<table>\w+)\(\*\)")


class InMemoryStore:
    """In-memory stand-in for the PostgREST store client.

    Related tables are linked by a ``<parent>_id`` column; deleting a parent row
    removes its children, mirroring ``ON DELETE CASCADE``.
    """

    def __init__(self) -> None:
        self.tables: dict[str, list[Row]] = {"schedule": [], "task": []}
        self.calls: list[tuple[str, str]] = []
        self.failures: dict[tuple[str, str], StoreError] = {}
        self.retained_deletes: set[str] = set()
        self.closed = False

    def fail(self, operation: str, table: str, *, message: str = "store unavailable") -> None:
        """Make every later ``operation`` on ``table`` report a store error."""
        self.failures[(operation, table)] = StoreError(
            message=message, code="PGRST000"
        )

    def retain_deletes(self, table: str) -> None:
        """Make deletes on ``table`` succeed without removing anything."""
        self.retained_deletes.add(table)

    def seed(self, table: str, **values: object) -> Row:
        """Insert one row directly, bypassing failure injection."""
        row = self._new_row(values)
        if "id" in values:
            row["id"] = str(values["id"])
        self.tables.setdefault(table, []).append(row)
        return dict(row)

    def select(
        self,
        *,
        table: str,
        columns: str = "*",
        filters: Mapping[str, object] | None = None,
    ) -> StoreResult:
        failed = self._check("select", table)
        if failed is not None:
            return failed
        rows = self._matching(table, filters)
        return StoreResult(data=[self._render(row, columns) for row in rows])

    def insert(
        self, *, table: str, row: Mapping[str, object], columns: str = "*"
    ) -> StoreResult:
        failed = self._check("insert", table)
        if failed is not None:
            return failed
        stored = self._new_row(row)
        self.tables.setdefault(table, []).append(stored)
        return StoreResult(data=[self._render(stored, columns)])

    def update(
        self,
        *,
        table: str,
        values: Mapping[str, object],
        filters: Mapping[str, object],
        columns: str = "*",
    ) -> StoreResult:
        failed = self._check("update", table)
        if failed is not None:
            return failed
        rows = self._matching(table, filters)
        for row in rows:
            row.update(values)
        return StoreResult(data=[self._render(row, columns) for row in rows])

    def delete(self, *, table: str, filters: Mapping[str, object]) -> StoreResult:
        failed = self._check("delete", table)
        if failed is not None:
            return failed
        if table in self.retained_deletes:
            return StoreResult()
        doomed = self._matching(table, filters)
        self._remove(table, doomed)
        return StoreResult()

    def close(self) -> None:
        self.closed = True

    def _check(self, operation: str, table: str) -> StoreResult | None:
        self.calls.append((operation, table))
        error = self.failures.get((operation, table))
        if error is None:
            return None
        return StoreResult(error=error)

    def _matching(
        self, table: str, filters: Mapping[str, object] | None
    ) -> list[Row]:
        rows = self.tables.setdefault(table, [])
        return [
            row
            for row in rows
            if all(str(row.get(key)) == str(value) for key, value in (filters or {}).items())
        ]

    def _remove(self, table: str, doomed: list[Row]) -> None:
        ids = {str(row["id"]) for row in doomed}
        self.tables[table] = [row for row in self.tables[table] if str(row["id"]) not in ids]
        foreign_key = f"{table}_id"
        for child_table, rows in self.tables.items():
            children = [row for row in rows if str(row.get(foreign_key)) in ids]
            if children:
                self._remove(child_table, children)

    def _render(self, row: Row, columns: str) -> Row:
        rendered = dict(row)
        for match in _EMBED_RE.finditer(columns):
            related = self.tables.get(match["table"], [])
            rendered[match["alias"]] = [
                dict(child)
                for child in related
                if str(child.get(f"{self._parent_name(row)}_id")) == str(row["id"])
            ]
        return rendered

    def _parent_name(self, row: Row) -> str:
        for name, rows in self.tables.items():
            if any(candidate is row for candidate in rows):
                return name
        return ""

    @staticmethod
    def _new_row(values: Mapping[str, object]) -> Row:
        row = dict(values)
        row["id"] = str(uuid.uuid4())
        row["created_at"] = datetime.now(UTC).isoformat()
        return row


@pytest.fixture
def store() -> InMemoryStore:
    """Return one empty in-memory store."""
    return InMemoryStore()
