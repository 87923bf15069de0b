"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), short‑lived cursors for reads (``get_cursor``),
write transactions that hold the database lock from the first
statement (``transaction``) and schema setup on application start
(``init_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.  Table and
column names follow the existing travel agency schema so that data
created by earlier deployments can be served unchanged.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


logger = logging.getLogger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"
PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent  # travel_api/


def get_database_path() -> str:
    """Resolve ``settings.database_url`` to a database file path.

    Accepts a plain path or a ``sqlite:///<path>`` URL.  Relative paths
    are taken relative to the ``travel_api`` package directory so the
    location does not depend on the working directory of the server.
    """
    db_url = settings.database_url
    if db_url.startswith(SQLITE_URL_PREFIX):
        db_url = db_url[len(SQLITE_URL_PREFIX):]
    path = Path(db_url)
    if not path.is_absolute():
        path = PACKAGE_ROOT / path
    return str(path.resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.  Foreign key enforcement is switched on for the
    lifetime of the connection, since SQLite leaves it off by default.
    """
    conn = sqlite3.connect(get_database_path(), timeout=settings.db_timeout)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on a fresh connection.

    Pending writes are committed when the block succeeds and discarded
    if it raises.  The connection is always closed.
    """
    conn = get_connection()
    try:
        try:
            yield conn.cursor()
        except BaseException:
            conn.rollback()
            raise
        conn.commit()
    finally:
        conn.close()


@contextmanager
def transaction() -> Iterator[sqlite3.Cursor]:
    """Run a block of statements as one serialized write transaction.

    ``BEGIN IMMEDIATE`` acquires SQLite's reserved lock before the first
    read, so no other writer can commit between the checks performed
    inside the block and the writes that depend on them.  Concurrent
    callers wait up to ``settings.db_timeout`` seconds for the lock.
    The transaction is committed when the block exits normally and
    rolled back if it raises.
    """
    conn = get_connection()
    try:
        conn.execute("BEGIN IMMEDIATE")
        try:
            yield conn.cursor()
        except BaseException:
            conn.rollback()
            raise
        conn.commit()
    finally:
        conn.close()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS Client (
            IdClient INTEGER PRIMARY KEY AUTOINCREMENT,
            FirstName TEXT NOT NULL,
            LastName TEXT NOT NULL,
            Email TEXT NOT NULL,
            Telephone TEXT,
            Pesel TEXT
        );

        CREATE TABLE IF NOT EXISTS Country (
            IdCountry INTEGER PRIMARY KEY AUTOINCREMENT,
            Name TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS Trip (
            IdTrip INTEGER PRIMARY KEY AUTOINCREMENT,
            Name TEXT NOT NULL,
            Description TEXT,
            DateFrom TIMESTAMP NOT NULL,
            DateTo TIMESTAMP NOT NULL,
            MaxPeople INTEGER NOT NULL
        );

        CREATE TABLE IF NOT EXISTS Country_Trip (
            IdCountry INTEGER NOT NULL,
            IdTrip INTEGER NOT NULL,
            PRIMARY KEY (IdCountry, IdTrip),
            FOREIGN KEY(IdCountry) REFERENCES Country(IdCountry),
            FOREIGN KEY(IdTrip) REFERENCES Trip(IdTrip)
        );

        -- RegisteredAt and PaymentDate hold dates encoded as YYYYMMDD integers.
        CREATE TABLE IF NOT EXISTS Client_Trip (
            IdClient INTEGER NOT NULL,
            IdTrip INTEGER NOT NULL,
            RegisteredAt INTEGER NOT NULL,
            PaymentDate INTEGER,
            PRIMARY KEY (IdClient, IdTrip),
            FOREIGN KEY(IdClient) REFERENCES Client(IdClient),
            FOREIGN KEY(IdTrip) REFERENCES Trip(IdTrip)
        );
        """,
    ),
    # Migration 2: index used by the capacity count
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_client_trip_trip ON Client_Trip(IdTrip);
        """,
    ),
]


def init_db() -> int:
    """Bring the schema up to date and return its version.

    Each pending entry of ``MIGRATIONS`` runs in its own transaction
    together with the row recording its version, so a failing migration
    leaves neither partial tables nor a version marker behind.  New
    migrations must be appended with an incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        current = cursor.execute(
            "SELECT COALESCE(MAX(version), 0) AS version FROM migrations"
        ).fetchone()["version"]

        for version, sql in MIGRATIONS:
            if version <= current:
                continue
            cursor.executescript(
                f"BEGIN;\n{sql}\nINSERT INTO migrations (version) VALUES ({version});\nCOMMIT;"
            )
            logger.info("Applied schema migration %s", version)
            current = version
    return current
