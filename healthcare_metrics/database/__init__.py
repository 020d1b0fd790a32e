from .connection import get_connection, init_database
from .datasource import SQLiteDataSource

__all__ = ["get_connection", "init_database", "SQLiteDataSource"]
