"""Cache key derivation from structured query parameters."""

import hashlib
from typing import Any

from ..errors import SerializationError
from .codec import encode

FALLBACK_SUFFIX = "fallback"


def derive_key(prefix: str, params: Any) -> str:
    """
    Build a deterministic cache key ``"{prefix}:{sha256-hex}"`` for ``params``.

    ``params`` is serialized canonically (sorted keys, compact separators) so
    equal values hash to the same key across calls and processes. When the
    parameters cannot be serialized the key degrades to ``"{prefix}:fallback"``;
    every unserializable input for a prefix shares that one key.

    Args:
        prefix: Key namespace, e.g. ``"user"``
        params: Any JSON-representable value

    Returns:
        The derived cache key
    """
    try:
        data = encode(params, canonical=True)
    except SerializationError:
        return f"{prefix}:{FALLBACK_SUFFIX}"

    digest = hashlib.sha256(data).hexdigest()
    return f"{prefix}:{digest}"
