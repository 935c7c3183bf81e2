"""Secret key handles and key acquisition.

A :class:`SecretKey` is an opaque handle produced by a cryptographic
provider. It is bound to one hash algorithm, usable only for signing, and its
material is never exposed through the public API. Callers may also hand raw
key material (``bytes`` or ``str``) to the comparator; :func:`key_source`
classifies such values once at the API boundary so the rest of the pipeline
never inspects types again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from .algorithms import DEFAULT_ALGORITHM, Algorithm, validate_algorithm
from .coercion import is_bytes_like
from .errors import InvalidInputType, InvalidKeyLength
from .providers.base import call_provider

if TYPE_CHECKING:  # pragma: no cover - circular import hints
    from .providers.base import CryptoProvider

logger = logging.getLogger(__name__)

DEFAULT_KEY_LENGTH = 64  # bytes


@dataclass(frozen=True, eq=False)
class SecretKey:
    """Opaque HMAC key handle.

    ``handle`` belongs to the provider that created the key; only that
    provider knows how to use it. Equality is identity so that key material
    is never compared with ``==``.
    """

    algorithm: Algorithm
    length_bits: int
    handle: object = field(repr=False)
    usages: frozenset = frozenset({"sign"})


@dataclass(frozen=True)
class RawBytes:
    """Caller-supplied key material given as bytes."""

    data: bytes = field(repr=False)


@dataclass(frozen=True)
class RawText:
    """Caller-supplied key material given as text, used as UTF-8."""

    text: str = field(repr=False)

    def encode(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True)
class OpaqueKeyHandle:
    """A key handle previously produced by a provider."""

    key: SecretKey


KeySource = Union[RawBytes, RawText, OpaqueKeyHandle]


def key_source(value: object) -> KeySource:
    """Classify ``value`` as one of the :data:`KeySource` variants."""
    if isinstance(value, (RawBytes, RawText, OpaqueKeyHandle)):
        return value
    if isinstance(value, SecretKey):
        return OpaqueKeyHandle(value)
    if isinstance(value, str):
        return RawText(value)
    if is_bytes_like(value):
        return RawBytes(bytes(value))
    raise InvalidInputType(value, "secret key")


def _check_key_length(key_length: int | None) -> int:
    if key_length is None:
        return DEFAULT_KEY_LENGTH
    # bool is an int subclass but never a meaningful length
    if isinstance(key_length, bool) or not isinstance(key_length, int):
        raise InvalidKeyLength(
            f"key length must be an integer number of bytes, got {key_length!r}"
        )
    if key_length <= 0:
        raise InvalidKeyLength(f"key length must be positive, got {key_length}")
    return key_length


async def generate_key(
    provider: "CryptoProvider",
    key_length: int | None = DEFAULT_KEY_LENGTH,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
) -> SecretKey:
    """Generate a fresh signing key of ``key_length`` bytes (``None``: 64).

    Arguments are validated before the provider is touched. Key material is
    drawn from the provider's cryptographically secure random source.
    """
    algo = validate_algorithm(algorithm)
    length_bits = _check_key_length(key_length) * 8
    logger.debug("generating %d-bit %s key", length_bits, algo)
    return await call_provider(provider.generate_key, algo, length_bits)


async def accept_key(
    provider: "CryptoProvider",
    source: KeySource,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
) -> SecretKey:
    """Return a :class:`SecretKey` for ``source``.

    Opaque handles pass through unchanged. Raw material is imported and bound
    to ``algorithm``, the algorithm of the HMAC it will be used for.
    """
    if isinstance(source, OpaqueKeyHandle):
        return source.key
    algo = validate_algorithm(algorithm)
    raw = source.encode() if isinstance(source, RawText) else source.data
    logger.debug("importing raw %s key", algo)
    return await call_provider(provider.import_key, raw, algo)


__all__ = [
    "DEFAULT_KEY_LENGTH",
    "KeySource",
    "OpaqueKeyHandle",
    "RawBytes",
    "RawText",
    "SecretKey",
    "accept_key",
    "generate_key",
    "key_source",
]
