"""smalldb - an in-process key-value store mirrored to a single JSON file.

By default, smalldb's internal logging is disabled when used as a library.
Library users can enable logging by calling smalldb.enable_logging().
"""

from smalldb.common import disable_library_logging, enable_library_logging
from smalldb.store import (
    JsonCodec,
    JsonStore,
    KeyValueStore,
    StoreDecodeError,
    StoreDirectoryError,
    StoreEncodeError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    Transaction,
    TransactionClosedError,
)

disable_library_logging()

enable_logging = enable_library_logging
open_store = JsonStore.open

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
    "enable_logging",
    "open_store",
]
