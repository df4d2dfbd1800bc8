"""
SQLite storage and a small migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and for applying migrations on application start
(``init_db``).  The three tables mirror the wallet's collections:
``participants``, ``sessions`` and ``operations``.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS participants (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS sessions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            id_user INTEGER NOT NULL,
            token TEXT NOT NULL UNIQUE,
            FOREIGN KEY(id_user) REFERENCES participants(id)
        );

        CREATE TABLE IF NOT EXISTS operations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            value NUMERIC NOT NULL,
            description TEXT NOT NULL,
            type TEXT NOT NULL CHECK (type IN ('entrada', 'saida')),
            date TEXT NOT NULL,
            id_user INTEGER NOT NULL,
            FOREIGN KEY(id_user) REFERENCES participants(id)
        );

        CREATE INDEX IF NOT EXISTS idx_operations_id_user ON operations(id_user);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    A ``sqlite:///`` prefix is stripped.  If the remaining path is
    absolute, use it directly; otherwise resolve it relative to the
    project root.
    """
    db_url = settings.database_url
    if db_url.startswith("sqlite:///"):
        db_url = db_url[len("sqlite:///"):]
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name, and foreign keys are enforced for the lifetime of the
    connection.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any migration in
    ``MIGRATIONS`` with a higher version number.  Errors are logged
    and re‑raised; there is no retry.
    """
    try:
        with get_cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
    except sqlite3.Error as exc:
        logger.error("Could not initialise database %s: %s", get_database_path(), exc)
        raise
    logger.info("Database ready (schema version %s)", current_version)
