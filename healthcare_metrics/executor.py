"""Query catalogue executor: look up a named query, bind parameters, stream rows."""

import logging
from collections.abc import Mapping
from typing import Any

from .catalogue import CATALOGUE, QueryDescriptor
from .exceptions import DataSourceError, UnknownQuery
from .parameters import bind_params

logger = logging.getLogger(__name__)

FETCH_SIZE = 100


class ResultSet:
    """Rows from a single query execution.

    Iterating yields one dict per row, keyed by column name. The rows are read
    lazily from the cursor and can only be consumed once. The cursor is closed
    when the rows run out, when fetching fails, or on ``close()``.
    """

    def __init__(self, query: str, columns: tuple[str, ...], cursor):
        self.query = query
        self.columns = columns
        self._cursor = cursor
        self._buffer: list = []
        self._exhausted = False
        self._closed = False

    def __iter__(self):
        return self

    def __next__(self) -> dict[str, Any]:
        if not self._buffer:
            if self._exhausted:
                raise StopIteration
            try:
                self._buffer = list(self._cursor.fetchmany(FETCH_SIZE))
            except Exception as e:
                logger.error("Fetching rows for %s failed: %s", self.query, e)
                self.close()
                raise DataSourceError(f"Failed to fetch rows for {self.query!r}: {e}") from e
            if not self._buffer:
                self.close()
                raise StopIteration
            self._buffer.reverse()
        return dict(zip(self.columns, self._buffer.pop()))

    def fetchall(self) -> list[dict[str, Any]]:
        """Consume and return all remaining rows."""
        return list(self)

    def close(self) -> None:
        """Release the cursor; unread rows are discarded."""
        self._exhausted = True
        self._buffer = []
        if not self._closed:
            self._closed = True
            self._cursor.close()

    def __enter__(self) -> "ResultSet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class QueryCatalogue:
    """Runs catalogued queries against a data source.

    The data source is any object with ``execute(statement, params)`` returning
    a DB-API cursor. The catalogue never closes it.
    """

    def __init__(self, data_source, queries: Mapping[str, QueryDescriptor] = CATALOGUE):
        self.data_source = data_source
        self._queries = queries

    def list_queries(self) -> tuple[QueryDescriptor, ...]:
        """Return all catalogued query descriptors."""
        return tuple(self._queries.values())

    def describe(self, name: str) -> QueryDescriptor:
        """Get a single descriptor by name."""
        descriptor = self._queries.get(name)
        if descriptor is None:
            raise UnknownQuery(name)
        return descriptor

    def run(self, name: str, params: Mapping[str, Any] | None = None) -> ResultSet:
        """Validate params, execute the named query once and return its rows."""
        descriptor = self.describe(name)
        bound = bind_params(descriptor.params_model, params)

        logger.debug("Running %s with params %s", name, sorted(bound))
        try:
            cursor = self.data_source.execute(descriptor.statement, bound)
        except DataSourceError:
            raise
        except Exception as e:
            logger.error("Query %s failed: %s", name, e)
            raise DataSourceError(f"Query {name!r} failed: {e}") from e

        columns = tuple(col[0] for col in cursor.description or ())
        return ResultSet(name, columns, cursor)
