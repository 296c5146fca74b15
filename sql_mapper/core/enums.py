"""Database backend enumeration."""

from __future__ import annotations

from enum import Enum


class DatabaseBackend(Enum):
    """Supported database backends."""

    MYSQL = "mysql"
    SQLITE = "sqlite"
