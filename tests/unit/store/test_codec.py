from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from result import is_err, is_ok

from smalldb.store.codec import JsonCodec
from smalldb.store.models import StoreDecodeError, StoreEncodeError


@dataclass
class User:
    Name: str
    Age: int


class Preferences(BaseModel):
    theme: str
    tags: list[str] = []


def test_encode_uses_two_space_indent_and_trailing_newline() -> None:
    codec: JsonCodec[User] = JsonCodec(User)

    result = codec.encode({"user:1": User(Name="Alice", Age=30)})

    assert is_ok(result)
    assert result.unwrap() == b'{\n  "user:1": {\n    "Name": "Alice",\n    "Age": 30\n  }\n}\n'


def test_encode_empty_mapping() -> None:
    codec: JsonCodec[int] = JsonCodec(int)

    assert codec.encode({}).unwrap() == b"{}\n"


def test_encode_keeps_insertion_order() -> None:
    codec: JsonCodec[int] = JsonCodec(int)

    payload = codec.encode({"b": 2, "a": 1}).unwrap()

    assert payload.index(b'"b"') < payload.index(b'"a"')


def test_encode_writes_non_ascii_as_utf8() -> None:
    codec: JsonCodec[str] = JsonCodec(str)

    payload = codec.encode({"greeting": "héllo"}).unwrap()

    assert "héllo".encode() in payload


def test_encode_rejects_unserializable_value() -> None:
    codec: JsonCodec[Any] = JsonCodec(Any)

    result = codec.encode({"key": object()})

    assert is_err(result)
    assert isinstance(result.unwrap_err(), StoreEncodeError)


def test_decode_builds_value_type_instances() -> None:
    codec: JsonCodec[User] = JsonCodec(User)

    result = codec.decode(b'{"user:1": {"Name": "Alice", "Age": 30}}')

    assert is_ok(result)
    assert result.unwrap() == {"user:1": User(Name="Alice", Age=30)}


def test_decode_supports_pydantic_models() -> None:
    codec: JsonCodec[Preferences] = JsonCodec(Preferences)

    result = codec.decode(b'{"ui": {"theme": "dark", "tags": ["a"]}}')

    assert result.unwrap() == {"ui": Preferences(theme="dark", tags=["a"])}


def test_decode_round_trips_encoded_mapping() -> None:
    codec: JsonCodec[Preferences] = JsonCodec(Preferences)
    mapping = {
        "one": Preferences(theme="dark"),
        "two": Preferences(theme="light", tags=["x", "y"]),
    }

    decoded = codec.encode(mapping).and_then(codec.decode)

    assert decoded.unwrap() == mapping


def test_decode_rejects_malformed_json() -> None:
    codec: JsonCodec[int] = JsonCodec(int)

    result = codec.decode(b"{invalid json")

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, StoreDecodeError)
    assert error.message.startswith("Invalid database contents")


def test_decode_rejects_non_object_top_level() -> None:
    codec: JsonCodec[str] = JsonCodec(str)

    result = codec.decode(b'["unexpected"]')

    assert is_err(result)
    assert isinstance(result.unwrap_err(), StoreDecodeError)


def test_decode_reports_location_of_shape_mismatch() -> None:
    codec: JsonCodec[User] = JsonCodec(User)

    result = codec.decode(b'{"user:1": {"Name": "Alice"}}')

    assert is_err(result)
    error = result.unwrap_err()
    assert error.field == "user:1.Age"


def test_value_type_is_exposed() -> None:
    assert JsonCodec(User).value_type is User


def test_decode_rejects_number_stored_as_string() -> None:
    codec: JsonCodec[int] = JsonCodec(int)

    result = codec.decode(b'{"a": "7"}')

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, StoreDecodeError)
    assert error.field == "a"


def test_decode_rejects_float_for_int() -> None:
    codec: JsonCodec[int] = JsonCodec(int)

    assert is_err(codec.decode(b'{"a": 1.0}'))


def test_decode_rejects_truthy_values_for_bool() -> None:
    codec: JsonCodec[bool] = JsonCodec(bool)

    assert is_err(codec.decode(b'{"a": "yes"}'))
    assert is_err(codec.decode(b'{"b": 0}'))


def test_decode_rejects_string_field_in_dataclass() -> None:
    codec: JsonCodec[User] = JsonCodec(User)

    result = codec.decode(b'{"user:1": {"Name": "Alice", "Age": "30"}}')

    assert is_err(result)
    assert result.unwrap_err().field == "user:1.Age"


def test_decode_accepts_int_for_float() -> None:
    codec: JsonCodec[float] = JsonCodec(float)

    assert codec.decode(b'{"a": 1, "b": 2.5}').unwrap() == {"a": 1.0, "b": 2.5}
