"""SQL Mapper - a thin lazy-connecting wrapper for raw SQL access."""

from __future__ import annotations

from sql_mapper.core.connection import ConnectionConfig
from sql_mapper.core.enums import DatabaseBackend
from sql_mapper.core.exceptions import (
    AdapterError,
    ColumnMismatchError,
    ConnectionError,  # noqa: A004
    ExecutionError,
    InsertError,
    MapperError,
    MappingError,
    QueryError,
)
from sql_mapper.core.logging import Logger, StdLogger, configure_logging
from sql_mapper.core.mapper import Mapper, from_settings, new
from sql_mapper.core.settings import MapperSettings, get_settings
from sql_mapper.mapping.model import ModelMapper

__all__ = [
    # Connection
    "ConnectionConfig",
    "MapperSettings",
    "get_settings",
    # Mapper
    "Mapper",
    "new",
    "from_settings",
    # Logging
    "Logger",
    "StdLogger",
    "configure_logging",
    # Mapping
    "ModelMapper",
    # Enums
    "DatabaseBackend",
    # Exceptions
    "MapperError",
    "AdapterError",
    "ConnectionError",
    "ExecutionError",
    "QueryError",
    "InsertError",
    "MappingError",
    "ColumnMismatchError",
]
