from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from smalldb.common import AppInfo, LoggingConfig, get_default_database_path


class DatabaseSettings(BaseModel):
    path: Path = Field(default_factory=get_default_database_path)


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    logging: LoggingConfig = LoggingConfig()
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    model_config = SettingsConfigDict(
        env_prefix="SMALLDB_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "DatabaseSettings",
    "Settings",
    "get_settings",
]
