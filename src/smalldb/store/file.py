"""Disk I/O for the store's backing file."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from result import Err, Ok, Result

from smalldb.constants import DIRECTORY_MODE, FILE_MODE

from .models import StoreDirectoryError, StoreReadError, StoreWriteError


def ensure_parent_directory(path: Path) -> Result[None, StoreDirectoryError]:
    try:
        path.parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        return Err(
            StoreDirectoryError(
                path=path.parent,
                message=f"Failed to create data directory: {exc}",
            )
        )
    return Ok(None)


def read_file(path: Path) -> Result[bytes | None, StoreReadError]:
    """Read the raw file contents.

    Returns:
        Ok(bytes) with the file contents.
        Ok(None) when the file does not exist or holds only whitespace.
        Err(StoreReadError) on any other I/O failure.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return Ok(None)
    except OSError as exc:
        return Err(StoreReadError(path=path, message=f"Failed to read data: {exc}"))

    if not raw.strip():
        return Ok(None)
    return Ok(raw)


def write_file_atomic(path: Path, payload: bytes) -> Result[None, StoreWriteError]:
    """Replace ``path`` with ``payload`` via a synced sibling temp file."""
    tmp_path: Path | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, FILE_MODE)
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        return Err(StoreWriteError(path=path, message=f"Failed to write data: {exc}"))
    return Ok(None)
