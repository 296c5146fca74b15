"""Database adapter protocol.

Every adapter module MUST implement this protocol so the Mapper can drive
any backend through the same calls. Statements use ``?`` placeholders.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from sql_mapper.core.connection import ConnectionConfig


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    def connect(self, config: ConnectionConfig) -> Any:
        """Open a single connection in autocommit mode."""
        ...

    def close(self, connection: Any) -> None:
        """Close the connection."""
        ...

    def query(self, connection: Any, sql: str) -> Any:
        """Execute raw SQL and return a cursor-like object."""
        ...

    def prepare(self, connection: Any, sql: str) -> Any:
        """Prepare a parameterized statement."""
        ...

    def execute(self, statement: Any, values: Sequence[Any]) -> Any:
        """Execute a prepared statement once with positional values."""
        ...

    def release(self, statement: Any) -> None:
        """Release a prepared statement."""
        ...
