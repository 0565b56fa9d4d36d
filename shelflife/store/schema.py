"""Database schema definitions for the key/value inventory store."""

from __future__ import annotations

import sqlite3
from pathlib import Path

_SCHEMA_VERSION = 1

_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime'))
);

CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER NOT NULL
);
"""


def ensure_schema(db_path: str | Path) -> sqlite3.Connection:
    """Open (or create) the database and ensure the schema is up to date.

    Args:
        db_path: Path to the SQLite database file, or ":memory:".

    Returns:
        An open sqlite3.Connection with the schema applied.
    """
    if str(db_path) != ":memory:":
        db_path = Path(db_path).expanduser()
        db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    try:
        row = conn.execute("SELECT version FROM schema_version").fetchone()
        current_version = row["version"] if row else 0
    except sqlite3.OperationalError:
        current_version = 0

    if current_version < _SCHEMA_VERSION:
        conn.executescript(_DDL)
        conn.execute("DELETE FROM schema_version")
        conn.execute(
            "INSERT INTO schema_version (version) VALUES (?)",
            (_SCHEMA_VERSION,),
        )
        conn.commit()

    return conn
