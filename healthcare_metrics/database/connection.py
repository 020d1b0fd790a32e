"""Database connection manager for SQLite."""

import sqlite3
from pathlib import Path

from healthcare_metrics import config

from .schema import SCHEMA


def get_connection(
    db_path: str | Path | None = None,
    check_same_thread: bool = True,
) -> sqlite3.Connection:
    """Get a database connection with row factory enabled."""
    conn = sqlite3.connect(db_path or config.DB_PATH, check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_database(db_path: str | Path | None = None) -> None:
    """Initialize the database with schema."""
    conn = get_connection(db_path)
    conn.executescript(SCHEMA)
    conn.commit()
    conn.close()
