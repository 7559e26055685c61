"""
softcache - Value Codec

JSON encoding for cache payloads and typed decoding into caller shapes.

Encoding goes through the stdlib json module with pydantic's
to_jsonable_python as the fallback converter, so BaseModel instances,
dataclasses, datetimes and UUIDs serialize without extra work. NaN and
infinities are rejected, as they have no JSON representation. Decoding
validates the raw JSON against a pydantic TypeAdapter for the requested
shape, which also handles the plain ``Any`` case.
"""

from __future__ import annotations

import dataclasses
import json
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from ..errors import DeserializationError, SerializationError


def _canonical_default(value: Any) -> Any:
    """
    Fallback converter for canonical mode.

    Sets are emitted as lists ordered by each element's canonical encoding,
    since their iteration order depends on the per-process string hash seed.
    Models and dataclasses are unpacked one level so sets nested inside them
    come back through here instead of being flattened in iteration order.
    """
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=lambda item: encode(item, canonical=True))
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    return to_jsonable_python(value)


def encode(value: Any, *, canonical: bool = False) -> bytes:
    """
    Serialize a value to UTF-8 JSON bytes.

    Args:
        value: Any JSON-representable value (pydantic models and dataclasses included)
        canonical: Sort object keys and set elements so equal values always
            produce equal bytes, in any process

    Raises:
        SerializationError: If the value cannot be represented as JSON
    """
    try:
        text = json.dumps(
            value,
            ensure_ascii=False,
            separators=(",", ":"),
            sort_keys=canonical,
            allow_nan=False,
            default=_canonical_default if canonical else to_jsonable_python,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(type(value).__name__, e) from e
    return text.encode("utf-8")


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def decode(data: bytes | str, shape: Any = Any) -> Any:
    """
    Deserialize JSON bytes into ``shape``.

    Args:
        data: Raw payload as read from the store
        shape: Destination type (``Any``, a builtin generic, a BaseModel, ...)

    Raises:
        DeserializationError: If the payload is not valid JSON or does not fit ``shape``
    """
    try:
        adapter = _adapter(shape)
    except TypeError:
        # unhashable shape, skip the adapter cache
        adapter = TypeAdapter(shape)

    try:
        return adapter.validate_json(data)
    except ValidationError as e:
        raise DeserializationError(_shape_name(shape), e) from e
