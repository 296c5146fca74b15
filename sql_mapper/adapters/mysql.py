"""MySQL adapter - mysql-connector-python."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple

from sql_mapper.core.connection import ConnectionConfig

DEFAULT_PORT = 3306


class PreparedStatement(NamedTuple):
    cursor: Any
    sql: str


class MysqlAdapter:
    """MySQL adapter using mysql-connector-python."""

    def connect(self, config: ConnectionConfig) -> Any:
        """Open an autocommit connection from the config's connection fields.

        Empty fields are left to the driver's defaults. A non-numeric port
        raises ValueError here, at connect time.
        """
        import mysql.connector

        args: dict[str, Any] = {k: v for k, v in config.connection_args().items() if v}
        args["port"] = int(config.port) if config.port else DEFAULT_PORT
        return mysql.connector.connect(autocommit=True, **args)

    def close(self, connection: Any) -> None:
        connection.close()

    def query(self, connection: Any, sql: str) -> Any:
        """Execute SQL and return a buffered cursor."""
        # Buffered so an unread result set doesn't block the next statement.
        cursor = connection.cursor(buffered=True)
        cursor.execute(sql)
        return cursor

    def prepare(self, connection: Any, sql: str) -> PreparedStatement:
        """Open a prepared cursor without contacting the server.

        mysql-connector sends the prepare and the execute together on the
        first ``execute``. Syntax errors and unknown tables in ``sql``
        therefore surface from ``execute``, and the Mapper reports them as
        execution failures.
        """
        return PreparedStatement(connection.cursor(prepared=True), sql)

    def execute(self, statement: PreparedStatement, values: Sequence[Any]) -> Any:
        statement.cursor.execute(statement.sql, tuple(values))
        return statement.cursor

    def release(self, statement: PreparedStatement) -> None:
        statement.cursor.close()
