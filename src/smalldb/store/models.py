"""Store error models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class StoreError(BaseModel):
    """Base store error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class StoreDirectoryError(StoreError):
    """The directory holding the data file could not be created."""

    path: Path


class StoreReadError(StoreError):
    """The data file exists but could not be read."""

    path: Path


class StoreDecodeError(StoreError):
    """Stored bytes are not a JSON object of the expected value type."""

    path: Path | None = None
    field: str | None = None


class StoreEncodeError(StoreError):
    """The mapping could not be serialised as the expected value type."""

    path: Path | None = None


class StoreWriteError(StoreError):
    """The encoded mapping could not be written to disk."""

    path: Path


class TransactionClosedError(RuntimeError):
    """A transaction was used after its batch function returned."""
