"""Inventory snapshot persistence."""

from __future__ import annotations

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path

from ..models import InventoryState
from .schema import ensure_schema

logger = logging.getLogger(__name__)

DEFAULT_KEY = "shelf-life-items"


class InventoryStore(ABC):
    """Abstract key/value store holding the whole inventory under one key."""

    @abstractmethod
    def load(self) -> InventoryState | None:
        """Return the stored snapshot, or None if nothing was ever saved."""
        ...

    @abstractmethod
    def save(self, state: InventoryState) -> None:
        """Replace the stored snapshot with the given one."""
        ...

    def close(self) -> None:
        pass


class MemoryInventoryStore(InventoryStore):
    """Keeps the serialized snapshot in memory."""

    def __init__(self, initial: InventoryState | None = None) -> None:
        self._blob: str | None = None
        if initial is not None:
            self.save(initial)

    def load(self) -> InventoryState | None:
        if self._blob is None:
            return None
        return InventoryState.from_list(json.loads(self._blob))

    def save(self, state: InventoryState) -> None:
        self._blob = json.dumps(state.to_list())


class SQLiteInventoryStore(InventoryStore):
    """Stores the serialized snapshot in the kv_store table."""

    def __init__(
        self,
        db_path: str | Path = "~/.config/shelflife/inventory.db",
        key: str = DEFAULT_KEY,
    ) -> None:
        self._db_path = db_path
        self._key = key
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = ensure_schema(self._db_path)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def load(self) -> InventoryState | None:
        conn = self._get_conn()
        row = conn.execute(
            "SELECT value FROM kv_store WHERE key = ?", (self._key,)
        ).fetchone()
        if row is None:
            logger.info("No stored inventory under %r", self._key)
            return None
        return InventoryState.from_list(json.loads(row["value"]))

    def save(self, state: InventoryState) -> None:
        conn = self._get_conn()
        conn.execute(
            """INSERT INTO kv_store (key, value) VALUES (?, ?)
               ON CONFLICT(key) DO UPDATE SET
                   value = excluded.value,
                   updated_at = datetime('now', 'localtime')""",
            (self._key, json.dumps(state.to_list(), ensure_ascii=False)),
        )
        conn.commit()
        logger.debug("Saved %d items under %r", len(state.items), self._key)
