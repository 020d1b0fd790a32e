"""Read-only SQLite adapter used by the query catalogue."""

import sqlite3
from pathlib import Path

from .connection import get_connection


class SQLiteCursor:
    """A cursor that owns its connection and closes both together."""

    def __init__(self, conn: sqlite3.Connection, cursor: sqlite3.Cursor):
        self._conn = conn
        self._cursor = cursor

    @property
    def description(self):
        return self._cursor.description

    def fetchmany(self, size: int) -> list[tuple]:
        return self._cursor.fetchmany(size)

    def fetchall(self) -> list[tuple]:
        return self._cursor.fetchall()

    def close(self) -> None:
        self._cursor.close()
        self._conn.close()


class SQLiteDataSource:
    """Executes parameterized read statements against a SQLite database.

    Every statement runs on its own connection, switched to query-only mode,
    so calls from different threads never share a connection and any
    statement that would modify the database is rejected by SQLite itself.
    """

    def __init__(self, db_path: str | Path | None = None):
        self.db_path = db_path
        self._closed = False

    def execute(self, statement: str, params: dict) -> SQLiteCursor:
        """Execute a statement with named parameters bound by the driver."""
        if self._closed:
            raise sqlite3.ProgrammingError("Cannot operate on a closed data source.")

        # The result may be read from another thread than the one running it.
        conn = get_connection(self.db_path, check_same_thread=False)
        conn.row_factory = None
        try:
            conn.execute("PRAGMA query_only = ON")
            cursor = conn.execute(statement, params)
        except sqlite3.Error:
            conn.close()
            raise
        return SQLiteCursor(conn, cursor)

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "SQLiteDataSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
