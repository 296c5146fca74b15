"""
Environment-driven settings.

Applications that keep credentials in the environment (or a ``.env`` file)
build their ConnectionConfig from here; the Mapper itself never reads the
environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sql_mapper.core.connection import ConnectionConfig


class MapperSettings(BaseSettings):
    # Database
    db_driver: str = Field("mysql", alias="MAPPER_DB_DRIVER")
    db_user: str = Field("", alias="MAPPER_DB_USER")
    db_password: str = Field("", alias="MAPPER_DB_PASSWORD")
    db_host: str = Field("", alias="MAPPER_DB_HOST")
    db_port: str = Field("", alias="MAPPER_DB_PORT")
    db_name: str = Field("", alias="MAPPER_DB_NAME")
    db_sslmode: str = Field("", alias="MAPPER_DB_SSLMODE")
    db_table: str = Field("", alias="MAPPER_DB_TABLE")

    # Application
    log_level: str = Field("INFO", alias="MAPPER_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            user=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            ssl_mode=self.db_sslmode,
            driver=self.db_driver,
        )


@lru_cache(maxsize=1)
def get_settings() -> MapperSettings:
    """
    Retrieve a cached instance of MapperSettings to avoid repeated env parsing.
    """
    return MapperSettings()


__all__ = ["MapperSettings", "get_settings"]
