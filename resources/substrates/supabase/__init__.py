"""Supabase remote store substrate exports."""

from resources.substrates.supabase.client_substrate import SupabaseClientSubstrate
from resources.substrates.supabase.substrate import (
    Row,
    StoreClient,
    StoreError,
    StoreResult,
    embed_columns,
)

__all__ = [
    "Row",
    "StoreClient",
    "StoreError",
    "StoreResult",
    "SupabaseClientSubstrate",
    "embed_columns",
]
