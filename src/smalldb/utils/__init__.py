from .locks import ReadWriteLock
from .validation import first_error_location, format_validation_error

__all__ = [
    "ReadWriteLock",
    "first_error_location",
    "format_validation_error",
]
