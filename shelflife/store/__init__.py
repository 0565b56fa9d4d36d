"""Persistent stores for the inventory snapshot."""

from .inventory import (
    DEFAULT_KEY,
    InventoryStore,
    MemoryInventoryStore,
    SQLiteInventoryStore,
)
from .schema import ensure_schema

__all__ = [
    "DEFAULT_KEY",
    "InventoryStore",
    "MemoryInventoryStore",
    "SQLiteInventoryStore",
    "ensure_schema",
]
