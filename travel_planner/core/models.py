"""SQLite-backed document store for city records.

Each city is one row holding a JSON document; ``seq`` keeps insertion order and
``id`` is the opaque identifier handed to clients.
"""
from __future__ import annotations

import json
import os
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import unquote, urlparse
from uuid import uuid4

from travel_planner.core.abstractions import CityRecord


SCHEMA = """
    CREATE TABLE IF NOT EXISTS cities (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id VARCHAR(32) NOT NULL UNIQUE,
        document TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
"""

_engine_lock = threading.Lock()
_database_path: Optional[str] = None


def _default_database_url() -> str:
    return os.getenv("DATABASE_URL", "sqlite:///travel_planner.db")


def sqlite_path(url: str) -> str:
    """Resolve ``sqlite:///relative.db`` and ``sqlite:////abs/path.db`` to a file path."""
    parsed = urlparse(url)
    if not parsed.scheme.startswith("sqlite"):
        raise ValueError(f"Unsupported database scheme: {parsed.scheme}")
    path = unquote(parsed.path)
    if path.startswith("/"):
        path = path[1:]
    if not path or path == ":memory:":
        raise ValueError("The city store needs a file backed SQLite database")
    return os.path.abspath(path)


def configure_engine(url: Optional[str] = None) -> str:
    """Point the store at ``url`` (or ``DATABASE_URL``) and create the schema."""

    global _database_path
    path = sqlite_path(url or _default_database_url())
    run_migrations(path)
    with _engine_lock:
        _database_path = path
    return path


def database_path() -> str:
    if _database_path is None:
        configure_engine()
    assert _database_path is not None
    return _database_path


def run_migrations(path: str) -> None:
    connection = sqlite3.connect(path)
    try:
        connection.execute(SCHEMA)
        connection.commit()
    finally:
        connection.close()


@contextmanager
def session_scope(path: Optional[str] = None) -> Iterator[sqlite3.Connection]:
    """Yield a connection that commits on success and rolls back on error."""
    connection = sqlite3.connect(path or database_path(), check_same_thread=False)
    connection.row_factory = sqlite3.Row
    try:
        with connection:
            yield connection
    finally:
        connection.close()


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _city_from_row(row: sqlite3.Row) -> CityRecord:
    document: Dict[str, Any] = json.loads(row["document"])
    return CityRecord(
        id=row["id"],
        name=document["name"],
        country=document.get("country"),
        weather_description=document["weather_description"],
        temperature=float(document["temperature"]),
        created_at=row["created_at"],
    )


def insert_city(connection: sqlite3.Connection, *, document: Dict[str, Any]) -> CityRecord:
    city_id = uuid4().hex
    created_at = utcnow_iso()
    connection.execute(
        "INSERT INTO cities (id, document, created_at) VALUES (?, ?, ?)",
        (city_id, json.dumps(document, sort_keys=True), created_at),
    )
    return CityRecord(
        id=city_id,
        name=document["name"],
        country=document.get("country"),
        weather_description=document["weather_description"],
        temperature=float(document["temperature"]),
        created_at=created_at,
    )


def fetch_city(connection: sqlite3.Connection, city_id: str) -> Optional[CityRecord]:
    row = connection.execute(
        "SELECT id, document, created_at FROM cities WHERE id = ?", (city_id,)
    ).fetchone()
    return _city_from_row(row) if row is not None else None


def fetch_cities(connection: sqlite3.Connection) -> List[CityRecord]:
    rows = connection.execute("SELECT id, document, created_at FROM cities ORDER BY seq")
    return [_city_from_row(row) for row in rows]


def delete_city(connection: sqlite3.Connection, city_id: str) -> bool:
    return connection.execute("DELETE FROM cities WHERE id = ?", (city_id,)).rowcount > 0


def count_cities(connection: sqlite3.Connection) -> int:
    return int(connection.execute("SELECT COUNT(*) FROM cities").fetchone()[0])
