"""Local key-value store.

Keeps small JSON-encoded values (event list, preferences) in a local SQLite
file. Survives restarts; not meant for concurrent writers.
"""

import json
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

import config
from logger import logger

# Module-level connection (reused for performance)
_connection: Optional[sqlite3.Connection] = None


def _get_connection() -> sqlite3.Connection:
    """Get or create database connection with WAL mode."""
    global _connection

    if _connection is not None:
        return _connection

    db_path = Path(config.STORE_DB)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    _connection = sqlite3.connect(
        config.STORE_DB,
        check_same_thread=False,
        timeout=10.0
    )
    _connection.row_factory = sqlite3.Row
    _connection.execute("PRAGMA journal_mode=WAL")
    _connection.execute("PRAGMA busy_timeout=5000")

    _init_schema(_connection)

    logger.info(f"Key-value store initialized: {config.STORE_DB}")
    return _connection


def _init_schema(conn: sqlite3.Connection) -> None:
    """Create tables if they don't exist."""
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS kv_store (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at INTEGER NOT NULL
        );
    """)
    conn.commit()


@contextmanager
def _transaction():
    """Context manager for database transactions."""
    conn = _get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def has_key(key: str) -> bool:
    """Check whether a value has ever been stored under ``key``."""
    row = _get_connection().execute(
        "SELECT 1 FROM kv_store WHERE key = ?", (key,)
    ).fetchone()
    return row is not None


def get_value(key: str, default: Any = None) -> Any:
    """Fetch and decode the value stored under ``key``.

    Returns ``default`` when the key is missing or holds invalid JSON.
    """
    row = _get_connection().execute(
        "SELECT value FROM kv_store WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return default

    try:
        return json.loads(row["value"])
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring corrupt value for '{key}': {e}")
        return default


def set_value(key: str, value: Any) -> None:
    """JSON-encode and store ``value`` under ``key``."""
    with _transaction() as conn:
        conn.execute(
            """
            INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            (key, json.dumps(value), int(time.time()))
        )


def close() -> None:
    """Close the database connection."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None
