"""
SQLite backed Record Store for school records.

``SchoolStore`` owns one SQLite connection for the lifetime of the
application: it is opened at startup, placed on ``app.state`` and
closed on shutdown.  Request handlers receive it through the
``get_store`` dependency, which keeps the store replaceable in tests.

Every driver failure is re-raised as ``StorageError`` with the
original exception chained.  Each operation is a single statement, so
a failed insert leaves no partial row behind.

Schema changes are kept in ``MIGRATIONS`` and recorded in the
``migrations`` table; ``init_schema`` applies the ones not yet seen.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Request

from .config import settings
from .exceptions import StorageError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: schools table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS schools (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            address TEXT NOT NULL,
            latitude REAL NOT NULL,
            longitude REAL NOT NULL
        );
        """,
    ),
]

SCHOOL_COLUMNS = "id, name, address, latitude, longitude"


def resolve_database_path(database_url: str) -> str:
    """Return an absolute path for ``database_url``.

    ``:memory:`` is passed through untouched; relative paths are
    resolved against the current working directory.
    """
    if database_url == MEMORY_DATABASE:
        return database_url
    return str(Path(database_url).expanduser().resolve())


class SchoolStore:
    """Persistence for the ``schools`` table."""

    def __init__(self, database_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.database_path = resolve_database_path(database_url or settings.database_url)
        self.timeout = settings.database_timeout if timeout is None else timeout
        self._conn: Optional[sqlite3.Connection] = None

    def open(self) -> "SchoolStore":
        """Open the connection and bring the schema up to date."""
        if self._conn is not None:
            return self
        try:
            # Opened once at startup and reused by the handlers; the
            # thread that opens it need not be the event loop's.
            conn = sqlite3.connect(self.database_path, timeout=self.timeout, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc
        conn.row_factory = sqlite3.Row
        self._conn = conn
        self.init_schema()
        logger.info("Opened school store at %s", self.database_path)
        return self

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed school store at %s", self.database_path)

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("School store is not open")
        return self._conn

    def init_schema(self) -> None:
        """Create the ``migrations`` table and apply pending migrations."""
        conn = self.connection
        try:
            conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0
            for version, sql in MIGRATIONS:
                if version > current_version:
                    conn.executescript(sql)
                    conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    logger.info("Applied migration %s", version)
                    current_version = version
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(str(exc)) from exc

    def insert(self, record: Dict[str, Any]) -> None:
        """Insert one school record.

        ``record`` must carry ``id``, ``name``, ``address``,
        ``latitude`` and ``longitude``.
        """
        conn = self.connection
        try:
            conn.execute(
                f"INSERT INTO schools ({SCHOOL_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
                (
                    record["id"],
                    record["name"],
                    record["address"],
                    record["latitude"],
                    record["longitude"],
                ),
            )
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(str(exc)) from exc

    def select_all(self) -> List[Dict[str, Any]]:
        """Return every school in whatever order SQLite yields them."""
        return self._select(f"SELECT {SCHOOL_COLUMNS} FROM schools")

    def select_all_ordered_by_name(self) -> List[Dict[str, Any]]:
        """Return every school ordered by name (BINARY collation)."""
        return self._select(f"SELECT {SCHOOL_COLUMNS} FROM schools ORDER BY name")

    def _select(self, query: str) -> List[Dict[str, Any]]:
        try:
            rows = self.connection.execute(query).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc
        return [dict(row) for row in rows]


def get_store(request: Request) -> SchoolStore:
    """FastAPI dependency returning the store opened at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StorageError("School store is not available")
    return store
