"""JSON codec for store mappings."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from result import Err, Ok, Result

from smalldb.utils.validation import first_error_location, format_validation_error

from .models import StoreDecodeError, StoreEncodeError

INDENT = 2


class JsonCodec[T]:
    """Converts ``dict[str, T]`` to and from indented JSON bytes.

    ``value_type`` is anything pydantic can build a ``TypeAdapter`` for:
    builtins, dataclasses, ``BaseModel`` subclasses, ``TypedDict``, unions.
    Decoding is strict: stored values of the wrong JSON type are rejected,
    never coerced.
    Key order follows the mapping's insertion order.
    """

    def __init__(self, value_type: Any) -> None:
        self._value_type = value_type
        self._adapter: TypeAdapter[dict[str, T]] = TypeAdapter(dict[str, value_type])

    @property
    def value_type(self) -> Any:
        return self._value_type

    def encode(self, mapping: dict[str, T]) -> Result[bytes, StoreEncodeError]:
        try:
            payload = self._adapter.dump_json(mapping, indent=INDENT, warnings="error")
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            return Err(StoreEncodeError(message=f"Failed to encode data: {exc}"))
        return Ok(payload + b"\n")

    def decode(self, raw: bytes) -> Result[dict[str, T], StoreDecodeError]:
        try:
            return Ok(self._adapter.validate_json(raw, strict=True))
        except ValidationError as exc:
            return Err(
                StoreDecodeError(
                    field=first_error_location(exc),
                    message=format_validation_error("database contents", exc),
                )
            )
