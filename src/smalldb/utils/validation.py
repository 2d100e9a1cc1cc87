"""Validation helpers for smalldb utilities."""

from __future__ import annotations

from pydantic import ValidationError

__all__ = ["first_error_location", "format_validation_error"]


def format_validation_error(kind: str, error: ValidationError) -> str:
    """Return a concise validation error message scoped to the provided kind."""
    details = error.errors()
    message = details[0].get("msg") if details else str(error)
    return f"Invalid {kind}: {message}"


def first_error_location(error: ValidationError) -> str | None:
    """Return the dotted location of the first validation error, if any."""
    details = error.errors()
    if not details:
        return None
    loc = details[0].get("loc") or ()
    return ".".join(str(part) for part in loc) or None
