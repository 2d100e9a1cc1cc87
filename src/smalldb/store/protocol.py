"""Key-value store protocol."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from result import Result

from .models import StoreError
from .transaction import Transaction


class KeyValueStore[T](Protocol):
    """Protocol for thread-safe key-value storage."""

    def get(self, key: str) -> tuple[T | None, bool]: ...

    def set(self, key: str, value: T) -> Result[None, StoreError]: ...

    def delete(self, key: str) -> Result[None, StoreError]: ...

    def get_all(self) -> dict[str, T]: ...

    def transaction[E](
        self,
        fn: Callable[[Transaction[T]], Result[None, E] | None],
    ) -> Result[None, E | StoreError]: ...
