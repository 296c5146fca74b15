"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from sql_mapper.core.connection import ConnectionConfig
from sql_mapper.core.mapper import Mapper


@pytest.fixture
def mysql_config() -> ConnectionConfig:
    """MySQL config; never connected in unit tests."""
    return ConnectionConfig(
        user="app",
        password="secret",
        host="db.local",
        port="3306",
        database="shop",
        ssl_mode="disable",
    )


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:")


@pytest.fixture
def sqlite_file_config(tmp_path: Path) -> ConnectionConfig:
    """SQLite file config; survives reconnects."""
    return ConnectionConfig(driver="sqlite", database=str(tmp_path / "mapper.db"))


@pytest.fixture
def adapter() -> MagicMock:
    """Adapter double whose connect() hands out a fresh connection each call."""
    adapter = MagicMock()
    adapter.connect.side_effect = lambda config: MagicMock(name="connection")
    return adapter


@pytest.fixture
def mapper(mysql_config: ConnectionConfig, adapter: MagicMock) -> Mapper:
    return Mapper(mysql_config, source="items", adapter=adapter)
