"""smalldb store module."""

from .codec import JsonCodec
from .models import (
    StoreDecodeError,
    StoreDirectoryError,
    StoreEncodeError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    TransactionClosedError,
)
from .protocol import KeyValueStore
from .store import JsonStore
from .transaction import Transaction

__all__ = [
    "JsonCodec",
    "JsonStore",
    "KeyValueStore",
    "StoreDecodeError",
    "StoreDirectoryError",
    "StoreEncodeError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "Transaction",
    "TransactionClosedError",
]
