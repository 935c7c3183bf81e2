"""Normalize comparison and HMAC inputs to ``bytes``."""

from __future__ import annotations

from typing import Union

from .errors import InvalidInputType

BytesLike = Union[bytes, bytearray, memoryview]
Value = Union[str, BytesLike]


def is_bytes_like(value: object) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def to_bytes(value: Value, *, what: str = "comparison value") -> bytes:
    """Return ``value`` as ``bytes``.

    Text is encoded as UTF-8 without Unicode normalization; bytes-like values
    are copied as-is. Any other type raises :class:`InvalidInputType`.
    """
    if isinstance(value, str):
        return value.encode("utf-8")
    if is_bytes_like(value):
        return bytes(value)
    raise InvalidInputType(value, what)


__all__ = ["BytesLike", "Value", "is_bytes_like", "to_bytes"]
