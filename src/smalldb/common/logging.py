"""Logging utilities for smalldb using Loguru.

This module provides logging configuration for both CLI and library usage:
- CLI usage: File-based logging with rotation and retention
- Library usage: Logging disabled by default, can be enabled by library users
"""

import sys
from pathlib import Path
from typing import Any, Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from smalldb.constants import APP_NAME

from .models import AppInfo
from .paths import get_data_directory


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")
    # None: show variable values in tracebacks outside prod only
    diagnose: bool | None = Field(default=None)


def setup_cli_logging(
    app_info: AppInfo,
    config: LoggingConfig,
    *,
    scope: str = "cli",
) -> int:
    """Send smalldb logs to a rotating file for the duration of a CLI run."""
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": scope, "env": app_info.environment})

    log_file = Path(config.log_file).expanduser() if config.log_file else _get_default_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    diagnose = config.diagnose if config.diagnose is not None else app_info.environment != "prod"
    sink_options: dict[str, Any] = {"serialize": True} if config.format == "json" else {"format": _get_text_format()}
    handler_id = logger.add(
        log_file,
        level=config.log_level,
        rotation=config.rotation,
        retention=config.retention,
        diagnose=diagnose,
        **sink_options,
    )

    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    return logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"


def _get_default_log_file_path() -> Path:
    return get_data_directory() / "logs" / f"{APP_NAME}.log"
