"""JSON file backed key-value store."""

from __future__ import annotations

import copy
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from result import Err, Ok, OkErr, Result, is_err

from smalldb.common import create_logger
from smalldb.utils.locks import ReadWriteLock

from .codec import JsonCodec
from .file import ensure_parent_directory, read_file, write_file_atomic
from .models import StoreDecodeError, StoreError
from .protocol import KeyValueStore
from .transaction import Transaction

logger = create_logger("store")


class JsonStore[T](KeyValueStore[T]):
    """In-memory mapping mirrored to a single JSON file.

    Reads share a reader/writer lock; every mutation holds the write side for
    its whole duration, file write included. A mutation stages the new mapping,
    writes it to disk, and only installs it in memory once the write succeeded,
    so a failed persist leaves both memory and disk at the previous state.

    Values are copied on the way in and on the way out; callers never hold a
    reference into the stored mapping.
    """

    def __init__(self, path: Path, codec: JsonCodec[T], data: dict[str, T] | None = None) -> None:
        self._path = path
        self._codec = codec
        self._data: dict[str, T] = data if data is not None else {}
        self._lock = ReadWriteLock()

    @classmethod
    def open(cls, path: str | os.PathLike[str], value_type: Any) -> Result[JsonStore[T], StoreError]:
        """Open the store at ``path``, loading any existing data.

        Args:
            path: Location of the JSON file. Missing parent directories are created.
            value_type: Type of the stored values, validated on load.

        Returns:
            Ok(JsonStore) with the loaded data (empty when the file is missing or empty).
            Err(StoreDirectoryError) when the parent directory cannot be created.
            Err(StoreReadError) when the file exists but cannot be read.
            Err(StoreDecodeError) when the file content is not a mapping of ``value_type``.
        """
        file_path = Path(path)
        codec: JsonCodec[T] = JsonCodec(value_type)
        logger.debug("Opening store", path=str(file_path))

        created = ensure_parent_directory(file_path)
        if is_err(created):
            logger.debug("Data directory unavailable", path=str(file_path.parent), error=created.err().message)
            return Err(created.err())

        raw = read_file(file_path)
        if is_err(raw):
            logger.debug("Data file unreadable", path=str(file_path), error=raw.err().message)
            return Err(raw.err())

        content = raw.unwrap()
        if content is None:
            logger.debug("Starting with empty store", path=str(file_path))
            return Ok(cls(file_path, codec))

        decoded = codec.decode(content)
        if is_err(decoded):
            error = decoded.err()
            logger.debug("Data file failed to decode", path=str(file_path), error=error.message)
            return Err(StoreDecodeError(path=file_path, field=error.field, message=error.message))

        data = decoded.unwrap()
        logger.debug("Store loaded", path=str(file_path), keys=len(data))
        return Ok(cls(file_path, codec, data))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def value_type(self) -> Any:
        return self._codec.value_type

    def get(self, key: str) -> tuple[T | None, bool]:
        with self._lock.read_locked():
            if key not in self._data:
                return None, False
            return copy.deepcopy(self._data[key]), True

    def set(self, key: str, value: T) -> Result[None, StoreError]:
        with self._lock.write_locked():
            staged = dict(self._data)
            staged[key] = copy.deepcopy(value)
            return self._persist(staged)

    def delete(self, key: str) -> Result[None, StoreError]:
        with self._lock.write_locked():
            staged = dict(self._data)
            staged.pop(key, None)
            return self._persist(staged)

    def get_all(self) -> dict[str, T]:
        with self._lock.read_locked():
            return copy.deepcopy(self._data)

    def keys(self) -> list[str]:
        with self._lock.read_locked():
            return list(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock.read_locked():
            return key in self._data

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._data)

    def transaction[E](
        self,
        fn: Callable[[Transaction[T]], Result[None, E] | None],
    ) -> Result[None, E | StoreError]:
        """Run ``fn`` against a private working copy and commit it atomically.

        The write lock is held for the whole call, so ``fn`` must not call back
        into this store; it should use the transaction it is given. When ``fn``
        returns ``Err`` (or raises) the working copy is discarded and the store
        is left untouched. When it returns ``Ok`` or ``None`` the working copy is
        persisted once and replaces the stored mapping. Any other return value
        discards the working copy and raises ``TypeError``.
        """
        with self._lock.write_locked():
            tx = Transaction(dict(self._data))
            try:
                outcome = fn(tx)
            except BaseException:
                tx._close()
                logger.debug("Transaction aborted by exception", path=str(self._path))
                raise

            staged = tx._close()
            if outcome is not None and not isinstance(outcome, OkErr):
                logger.debug("Transaction aborted", path=str(self._path))
                raise TypeError(
                    f"Transaction batch function must return a Result or None, got {type(outcome).__name__}"
                )
            if outcome is not None and is_err(outcome):
                logger.debug("Transaction aborted", path=str(self._path))
                return outcome

            logger.debug("Committing transaction", path=str(self._path), keys=len(staged))
            return self._persist(staged)

    def _persist(self, staged: dict[str, T]) -> Result[None, StoreError]:
        """Write ``staged`` to disk, then install it as the current mapping.

        Caller must hold the write lock.
        """
        encoded = self._codec.encode(staged)
        if is_err(encoded):
            error = encoded.err()
            logger.debug("Encoding failed, keeping previous state", path=str(self._path), error=error.message)
            return Err(error.model_copy(update={"path": self._path}))

        written = write_file_atomic(self._path, encoded.unwrap())
        if is_err(written):
            logger.debug("Write failed, keeping previous state", path=str(self._path), error=written.err().message)
            return Err(written.err())

        self._data = staged
        logger.debug("Store persisted", path=str(self._path), keys=len(staged))
        return Ok(None)
