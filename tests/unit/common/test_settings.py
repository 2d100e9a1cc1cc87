from __future__ import annotations

from pathlib import Path

import pytest

import smalldb.settings as settings_module
from smalldb.common import get_default_database_path
from smalldb.settings import Settings, get_settings


def test_default_database_path_uses_xdg_data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))

    settings = Settings()

    assert settings.database.path == tmp_path / "xdg" / "smalldb" / "db.json"
    assert get_default_database_path() == settings.database.path


def test_default_database_path_falls_back_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_default_database_path() == tmp_path / ".local" / "share" / "smalldb" / "db.json"


def test_env_overrides_nested_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMALLDB_DATABASE__PATH", str(tmp_path / "custom.json"))
    monkeypatch.setenv("SMALLDB_LOGGING__LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SMALLDB_APP__ENVIRONMENT", "test")

    settings = Settings()

    assert settings.database.path == tmp_path / "custom.json"
    assert settings.logging.log_level == "DEBUG"
    assert settings.app.environment == "test"


def test_get_settings_returns_singleton(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, "_settings", None)

    assert get_settings() is get_settings()
