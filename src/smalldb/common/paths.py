"""Path discovery utilities for smalldb."""

from __future__ import annotations

import os
from pathlib import Path

from smalldb.constants import APP_NAME, DEFAULT_DATABASE_FILENAME


def get_data_directory(app_name: str = APP_NAME) -> Path:
    """Get XDG data directory.

    Returns ~/.local/share/{app_name} (or XDG_DATA_HOME/{app_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / app_name


def get_default_database_path(app_name: str = APP_NAME) -> Path:
    return get_data_directory(app_name) / DEFAULT_DATABASE_FILENAME
