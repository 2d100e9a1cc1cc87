"""Common models and helpers used across smalldb modules."""

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo
from .paths import get_data_directory, get_default_database_path

__all__ = [
    "AppInfo",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "get_default_database_path",
    "setup_cli_logging",
]
