"""SQLite adapter - sqlite3 stdlib."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from typing import Any, NamedTuple

from sql_mapper.core.connection import ConnectionConfig


class PreparedStatement(NamedTuple):
    cursor: sqlite3.Cursor
    sql: str


class SqliteAdapter:
    """SQLite adapter using stdlib sqlite3.

    ``config.database`` is the file path (or ``:memory:``); the other
    connection fields are ignored.
    """

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        """Open an autocommit connection with name-addressable rows."""
        conn = sqlite3.connect(config.database, isolation_level=None)
        conn.row_factory = sqlite3.Row
        return conn

    def close(self, connection: sqlite3.Connection) -> None:
        connection.close()

    def query(self, connection: sqlite3.Connection, sql: str) -> sqlite3.Cursor:
        return connection.execute(sql)

    def prepare(self, connection: sqlite3.Connection, sql: str) -> PreparedStatement:
        """sqlite3 compiles on execute; only the cursor is opened here."""
        return PreparedStatement(connection.cursor(), sql)

    def execute(self, statement: PreparedStatement, values: Sequence[Any]) -> sqlite3.Cursor:
        return statement.cursor.execute(statement.sql, tuple(values))

    def release(self, statement: PreparedStatement) -> None:
        statement.cursor.close()
