"""Double HMAC verification.

Rather than comparing two secrets byte by byte, :class:`TimingSafeComparator`
computes ``HMAC(k, left)`` and ``HMAC(k, right)`` under a key ``k`` the
attacker does not know and compares the digests. Any early-exit timing in the
final ``==`` then depends on digest bytes that are uncorrelated with the
secrets themselves.

Two properties are deliberately *not* hidden:

* Inputs of different length, or empty inputs, return ``False`` straight
  away without computing any HMAC. Length is not treated as secret.
* A caller that passes the same ``secret_key`` to many comparisons of related
  secrets gives up part of the decorrelation. Keys are never forced to be
  single use; omit ``secret_key`` to get a fresh key per call.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from .algorithms import DEFAULT_ALGORITHM, Algorithm, validate_algorithm
from .coercion import Value, to_bytes
from .config import default_provider
from .engine import HmacEngine
from .keys import (
    DEFAULT_KEY_LENGTH,
    KeySource,
    SecretKey,
    accept_key,
    generate_key,
    key_source,
)
from .observability.trace import Tracer
from .providers.base import CryptoProvider

logger = logging.getLogger(__name__)

KeyInput = Union[SecretKey, KeySource, str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class CompareOptions:
    """Options accepted by :meth:`TimingSafeComparator.compare`.

    ``key_algorithm`` applies only when a key is generated; ``hmac_algorithm``
    applies when raw key material is imported. ``None`` means SHA-256 for the
    algorithms and 64 bytes for ``key_length``.
    """

    secret_key: Optional[KeyInput] = None
    key_length: Optional[int] = DEFAULT_KEY_LENGTH
    key_algorithm: Optional[Union[Algorithm, str]] = None
    hmac_algorithm: Optional[Union[Algorithm, str]] = None


class TimingSafeComparator:
    """Compare secrets with the double HMAC pattern."""

    def __init__(
        self, provider: CryptoProvider | None = None, tracer: Tracer | None = None
    ):
        self._provider = provider
        self._tracer = tracer or Tracer()

    @property
    def provider(self) -> CryptoProvider:
        # None tracks config.default_provider()
        return self._provider if self._provider is not None else default_provider()

    def engine(self) -> HmacEngine:
        return HmacEngine(self.provider, self._tracer)

    async def generate_secret_key(
        self,
        key_length: int | None = DEFAULT_KEY_LENGTH,
        algorithm: Algorithm | str = DEFAULT_ALGORITHM,
    ) -> SecretKey:
        """Generate a signing key the caller may reuse across comparisons."""
        return await generate_key(self.provider, key_length, algorithm)

    async def compute_hmac(
        self,
        key: KeyInput,
        message: Value,
        algorithm: Algorithm | str = DEFAULT_ALGORITHM,
    ) -> str:
        return await self.engine().compute_hmac(key, message, algorithm)

    async def compare(
        self,
        left: Value,
        right: Value,
        options: CompareOptions | None = None,
        **overrides,
    ) -> bool:
        """Return ``True`` if ``left`` and ``right`` hold the same bytes.

        ``overrides`` are the :class:`CompareOptions` fields and take
        precedence over ``options``. Invalid algorithms and input types raise
        before any cryptographic work; a mismatch returns ``False``.
        """
        opts = replace(options or CompareOptions(), **overrides)

        key_algo = (
            validate_algorithm(opts.key_algorithm)
            if opts.key_algorithm is not None
            else None
        )
        hmac_algo = (
            validate_algorithm(opts.hmac_algorithm)
            if opts.hmac_algorithm is not None
            else None
        )
        source = key_source(opts.secret_key) if opts.secret_key is not None else None
        left_bytes = to_bytes(left)
        right_bytes = to_bytes(right)

        provider = self.provider
        engine = HmacEngine(provider, self._tracer)

        with self._tracer.start_span("doublehmac.compare", provider=provider.name):
            if source is None:
                key = await generate_key(
                    provider, opts.key_length, key_algo or DEFAULT_ALGORITHM
                )
            else:
                key = await accept_key(provider, source, hmac_algo or DEFAULT_ALGORITHM)

            if len(left_bytes) != len(right_bytes) or not left_bytes:
                logger.debug(
                    "short-circuit: lengths %d and %d", len(left_bytes), len(right_bytes)
                )
                return False

            left_digest, right_digest = await asyncio.gather(
                engine.sign_hex(key, left_bytes, hmac_algo),
                engine.sign_hex(key, right_bytes, hmac_algo),
            )
            return left_digest == right_digest


_default_comparator = TimingSafeComparator()


async def compare_timing_safe(
    left: Value,
    right: Value,
    options: CompareOptions | None = None,
    **overrides,
) -> bool:
    """Module-level :meth:`TimingSafeComparator.compare` on the default provider."""
    return await _default_comparator.compare(left, right, options, **overrides)


async def generate_secret_key(
    key_length: int | None = DEFAULT_KEY_LENGTH,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
) -> SecretKey:
    return await _default_comparator.generate_secret_key(key_length, algorithm)


async def compute_hmac(
    key: KeyInput,
    message: Value,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
) -> str:
    return await _default_comparator.compute_hmac(key, message, algorithm)


__all__ = [
    "CompareOptions",
    "TimingSafeComparator",
    "compare_timing_safe",
    "compute_hmac",
    "generate_secret_key",
]
