"""SQL Mapper exception hierarchy.

Mapper operations never raise raw driver exceptions; the driver error is
chained as ``__cause__`` and its message reused verbatim.
"""

from __future__ import annotations


class MapperError(Exception):
    """Base exception for all SQL Mapper errors."""


# --- Adapter ---


class AdapterError(MapperError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised when opening or closing the connection fails."""


# --- Execution ---


class ExecutionError(MapperError):
    """Base for statement execution errors."""


class QueryError(ExecutionError):
    """Raised when a raw SQL query fails to execute."""


class InsertError(ExecutionError):
    """Raised when a batch insert fails to prepare or execute."""


# --- Mapping ---


class MappingError(MapperError):
    """Base for result-set mapping errors."""


class ColumnMismatchError(MappingError):
    """Raised when required fields cannot be mapped from row columns."""

    def __init__(self, target_class: str, missing_fields: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        super().__init__(f"Cannot map to {target_class}: missing fields {missing_fields}")
