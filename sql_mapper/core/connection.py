"""Connection configuration and adapter loading.

ConnectionConfig is a frozen Pydantic model holding the raw credentials.
Nothing is validated here; bad values surface when the adapter connects.
"""

from __future__ import annotations

import importlib
from typing import Any

from pydantic import BaseModel, ConfigDict

from sql_mapper.core.enums import DatabaseBackend
from sql_mapper.core.exceptions import AdapterError


class ConnectionConfig(BaseModel):
    """Configuration for a single database connection."""

    model_config = ConfigDict(frozen=True)

    user: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    database: str = ""
    # Accepted for compatibility, never passed to the driver.
    ssl_mode: str = ""
    driver: str = DatabaseBackend.MYSQL.value

    def connection_args(self) -> dict[str, str]:
        """The five fields a connection is opened with."""
        return {
            "user": self.user,
            "password": self.password,
            "host": self.host,
            "port": self.port,
            "database": self.database,
        }

    def info(self) -> str:
        """Password-free description used in log lines."""
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


# Adapter module mapping: backend → (module_path, class_name)
_ADAPTER_MAP: dict[DatabaseBackend, tuple[str, str]] = {
    DatabaseBackend.MYSQL: ("sql_mapper.adapters.mysql", "MysqlAdapter"),
    DatabaseBackend.SQLITE: ("sql_mapper.adapters.sqlite", "SqliteAdapter"),
}


def load_adapter(driver: str) -> Any:
    """Instantiate the adapter registered for *driver*."""
    try:
        backend = DatabaseBackend(driver.lower())
    except ValueError as e:
        raise AdapterError(f"Unsupported database driver: {driver}") from e

    module_path, cls_name = _ADAPTER_MAP[backend]
    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{driver}': {e}") from e
