"""The Mapper: one lazily opened connection plus raw-SQL helpers.

Every data operation connects on demand when no connection is held, so a
Mapper reconnects transparently after ``close()``. The connection check is
not atomic: a Mapper shared between threads needs external locking.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from sql_mapper.core.connection import ConnectionConfig, load_adapter
from sql_mapper.core.exceptions import (
    ConnectionError,  # noqa: A004
    InsertError,
    MapperError,
    MappingError,
    QueryError,
)
from sql_mapper.core.logging import Logger, join_values
from sql_mapper.core.settings import MapperSettings
from sql_mapper.core.sql import build_insert, build_select

log = logging.getLogger(__name__)

BuildCollection = Callable[[Any], list[Any]]


class Mapper:
    """Data-access wrapper around a single database connection.

    Args:
        config: Connection credentials, kept unchanged.
        source: Target table for inserts.
        logger: Optional Logger used for connect notices.
        build_collection: Optional row builder used by ``load_collection``.
        adapter: Adapter override; resolved from ``config.driver`` if omitted.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        *,
        source: str = "",
        logger: Logger | None = None,
        build_collection: BuildCollection | None = None,
        adapter: Any | None = None,
    ) -> None:
        self.config = config
        self.conn: Any = None
        self.source = source
        self.logger = logger
        self.build_collection = build_collection
        self._adapter = adapter if adapter is not None else load_adapter(config.driver)

    @property
    def adapter(self) -> Any:
        return self._adapter

    def __enter__(self) -> Mapper:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def connect(self) -> None:
        """Open the connection, replacing any connection already held."""
        if self.conn is not None:
            self.close()

        info = self.config.info()
        self._log("Connecting to mysql:", info)
        try:
            conn = self._adapter.connect(self.config)
        except Exception as e:
            raise ConnectionError(str(e)) from e
        if conn is None:
            raise ConnectionError("Connection to MySQL is nil")
        self._log("Connected to mysql:", info)
        self.conn = conn

    def _ensure_connected(self) -> None:
        if self.conn is None:
            self.connect()

    def query(self, sql: str) -> Any:
        """Execute raw SQL and return the cursor."""
        self._ensure_connected()
        try:
            return self._adapter.query(self.conn, sql)
        except Exception as e:
            raise QueryError(str(e)) from e

    def exec(self, sql: str) -> Any:
        """Same as ``query``."""
        return self.query(sql)

    def insert_batch(
        self,
        fields: Sequence[str],
        rows: Sequence[Sequence[Any]],
        on_duplicate: str | None = None,
    ) -> None:
        """Insert ``rows`` into ``self.source`` with one multi-row statement.

        An empty ``rows`` is a no-op and does not connect. ``on_duplicate``
        is appended verbatim after ``ON DUPLICATE KEY UPDATE``.
        """
        if not rows:
            return
        self._ensure_connected()

        sql, values = build_insert(self.source, fields, rows, on_duplicate)
        try:
            statement = self._adapter.prepare(self.conn, sql)
        except Exception as e:
            raise InsertError(str(e)) from e

        try:
            self._adapter.execute(statement, values)
        except Exception as e:
            log.error("MySQL exec: %s", e)
            self._release_after_failure(statement)
            raise InsertError(str(e)) from e

        try:
            self._adapter.release(statement)
        except Exception as e:
            raise InsertError(str(e)) from e

    def _release_after_failure(self, statement: Any) -> None:
        # The execute error is what the caller sees; a release error is only logged.
        try:
            self._adapter.release(statement)
        except Exception as e:
            log.warning("Releasing statement failed: %s", e)

    def insert(
        self,
        fields: Sequence[str],
        row: Sequence[Any],
        on_duplicate: str | None = None,
    ) -> None:
        self.insert_batch(fields, [row], on_duplicate)

    def load(self, source: str, fields: str, where: str | None = None) -> Any:
        """Run ``SELECT <fields> FROM <source>[ WHERE <where>];``.

        ``source`` applies to this call only; ``self.source`` is untouched.
        """
        return self.query(build_select(source, fields, where))

    def load_collection(self, source: str, fields: str, where: str | None = None) -> list[Any]:
        """Like ``load`` but returns the rows passed through ``build_collection``."""
        if self.build_collection is None:
            raise MappingError("No build_collection configured on mapper")
        cursor = self.load(source, fields, where)
        try:
            return self.build_collection(cursor)
        except MapperError:
            raise
        except Exception as e:
            raise MappingError(str(e)) from e

    def close(self) -> None:
        """Close the connection if one is held; the next operation reconnects."""
        log.info("Closing connection in mapper")
        if self.conn is None:
            return
        conn, self.conn = self.conn, None
        try:
            self._adapter.close(conn)
        except Exception as e:
            raise ConnectionError(str(e)) from e

    def _log(self, *data: Any) -> None:
        if self.logger is not None:
            self.logger.log(*data)
        else:
            log.info(join_values(data))


def from_settings(settings: MapperSettings, *, logger: Logger | None = None) -> Mapper:
    """Build a Mapper from environment settings, targeting ``settings.db_table``."""
    return new(settings.to_config(), source=settings.db_table, logger=logger)


def new(
    config: ConnectionConfig,
    *,
    source: str = "",
    logger: Logger | None = None,
    build_collection: BuildCollection | None = None,
) -> Mapper:
    """Build a Mapper with no open connection."""
    return Mapper(config, source=source, logger=logger, build_collection=build_collection)
