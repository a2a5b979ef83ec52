"""Supabase substrate implementation over the ``supabase`` client SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client, ClientOptions, create_client

from packages.planner_shared.config import SupabaseSettings
from packages.planner_shared.logging import fields, get_logger, log_context
from resources.substrates.supabase.substrate import Row, StoreError, StoreResult

_LOGGER = get_logger(__name__)


class SupabaseClientSubstrate:
    """Store client issuing table queries through one Supabase SDK client.

    The substrate owns the ``httpx.Client`` handed to the SDK and closes it
    on ``close``.
    """

    def __init__(self, *, client: Client, http: httpx.Client) -> None:
        self._client = client
        self._http = http

    @classmethod
    def from_settings(
        cls,
        settings: SupabaseSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> SupabaseClientSubstrate:
        """Build one substrate from Supabase connection settings."""
        instance_url = settings.instance_url.strip()
        if instance_url == "":
            raise ValueError("supabase.instance_url is required")
        key = settings.access_key
        if key == "":
            raise ValueError("supabase.service_role_key or supabase.anon_key is required")

        http = httpx.Client(timeout=settings.timeout_seconds, transport=transport)
        client = create_client(
            instance_url, key, options=ClientOptions(httpx_client=http)
        )
        return cls(client=client, http=http)

    def close(self) -> None:
        """Release the SDK's pooled connections."""
        self._http.close()

    def select(
        self,
        *,
        table: str,
        columns: str = "*",
        filters: Mapping[str, object] | None = None,
    ) -> StoreResult:
        """Select rows from one table."""
        query = _matching(self._client.table(table).select(columns), filters)
        return self._execute(query, operation="select", table=table)

    def insert(
        self, *, table: str, row: Mapping[str, object], columns: str = "*"
    ) -> StoreResult:
        """Insert one row and return the stored representation."""
        query = self._client.table(table).insert(dict(row)).select(columns)
        return self._execute(query, operation="insert", table=table)

    def update(
        self,
        *,
        table: str,
        values: Mapping[str, object],
        filters: Mapping[str, object],
        columns: str = "*",
    ) -> StoreResult:
        """Update matching rows and return their stored representation."""
        query = _matching(self._client.table(table).update(dict(values)), filters)
        return self._execute(query.select(columns), operation="update", table=table)

    def delete(self, *, table: str, filters: Mapping[str, object]) -> StoreResult:
        """Delete matching rows."""
        query = _matching(self._client.table(table).delete(), filters)
        return self._execute(query, operation="delete", table=table)

    def _execute(self, query: Any, *, operation: str, table: str) -> StoreResult:
        """Run one built query, folding SDK and transport failures into the result."""
        try:
            response = query.retry(False).execute()
        except APIError as exc:
            error = StoreError(
                message=exc.message or "store request failed",
                code=_text(exc.code),
                details=_text(exc.details),
                hint=_text(exc.hint),
            )
        except httpx.HTTPError as exc:
            error = StoreError(message=str(exc) or type(exc).__name__)
        else:
            return StoreResult(data=_rows(response.data))

        with log_context(
            {
                fields.STORE_OPERATION: operation,
                fields.STORE_TABLE: table,
                "store_code": error.code,
            }
        ):
            _LOGGER.warning("store call failed: %s", error.message)
        return StoreResult(error=error)


def _matching(query: Any, filters: Mapping[str, object] | None) -> Any:
    """Apply one ``eq`` filter per column."""
    for column, value in (filters or {}).items():
        query = query.eq(column, value)
    return query


def _rows(payload: Any) -> list[Row]:
    """Keep only the row objects of one response payload."""
    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    return []


def _text(value: object) -> str:
    return "" if value is None else str(value)
