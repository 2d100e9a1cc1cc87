"""Staging area for batched store mutations."""

from __future__ import annotations

import copy

from .models import TransactionClosedError


class Transaction[T]:
    """Private working copy handed to a ``JsonStore.transaction`` batch function.

    Operations take no locks and do no I/O; the owning store already holds its
    write lock. Nothing staged here is visible outside the transaction until
    the batch function succeeds and the store commits the working copy.
    """

    def __init__(self, data: dict[str, T]) -> None:
        self._data = data
        self._closed = False

    def get(self, key: str) -> tuple[T | None, bool]:
        self._check_open()
        if key not in self._data:
            return None, False
        return copy.deepcopy(self._data[key]), True

    def set(self, key: str, value: T) -> None:
        self._check_open()
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._check_open()
        self._data.pop(key, None)

    def get_all(self) -> dict[str, T]:
        self._check_open()
        return copy.deepcopy(self._data)

    def keys(self) -> list[str]:
        self._check_open()
        return list(self._data)

    def __contains__(self, key: object) -> bool:
        self._check_open()
        return key in self._data

    def __len__(self) -> int:
        self._check_open()
        return len(self._data)

    @property
    def closed(self) -> bool:
        return self._closed

    def _close(self) -> dict[str, T]:
        self._closed = True
        data, self._data = self._data, {}
        return data

    def _check_open(self) -> None:
        if self._closed:
            raise TransactionClosedError("Transaction used after its batch function returned")
