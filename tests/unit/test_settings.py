"""Unit tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from sql_mapper.core.mapper import from_settings
from sql_mapper.core.settings import MapperSettings, get_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run from an empty directory so no stray .env file is read."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()


class TestMapperSettings:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAPPER_DB_USER", "app")
        monkeypatch.setenv("MAPPER_DB_PASSWORD", "secret")
        monkeypatch.setenv("MAPPER_DB_HOST", "db.local")
        monkeypatch.setenv("MAPPER_DB_PORT", "3307")
        monkeypatch.setenv("MAPPER_DB_NAME", "shop")
        monkeypatch.setenv("MAPPER_DB_SSLMODE", "require")

        config = MapperSettings().to_config()

        assert config.connection_args() == {
            "user": "app",
            "password": "secret",
            "host": "db.local",
            "port": "3307",
            "database": "shop",
        }
        assert config.ssl_mode == "require"
        assert config.driver == "mysql"

    def test_reads_env_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text(
            "MAPPER_DB_DRIVER=sqlite\nMAPPER_DB_NAME=local.db\nMAPPER_DB_TABLE=items\n",
            encoding="utf-8",
        )
        settings = MapperSettings()
        assert settings.db_table == "items"
        assert settings.to_config().driver == "sqlite"
        assert settings.to_config().database == "local.db"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_from_settings_targets_configured_table(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MAPPER_DB_DRIVER", "sqlite")
        monkeypatch.setenv("MAPPER_DB_NAME", ":memory:")
        monkeypatch.setenv("MAPPER_DB_TABLE", "items")

        mapper = from_settings(MapperSettings())

        assert mapper.source == "items"
        assert mapper.config.driver == "sqlite"
        assert mapper.conn is None
