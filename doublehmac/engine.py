"""Keyed digest computation on top of a :class:`CryptoProvider`."""

from __future__ import annotations

import logging

from .algorithms import DEFAULT_ALGORITHM, Algorithm, validate_algorithm
from .coercion import Value, to_bytes
from .keys import KeySource, SecretKey, accept_key, key_source
from .observability.trace import Tracer
from .providers.base import CryptoProvider, call_provider

logger = logging.getLogger(__name__)


class HmacEngine:
    """Compute hex-encoded HMAC digests.

    The engine holds only its provider, so one instance may serve any number
    of concurrent calls.
    """

    def __init__(self, provider: CryptoProvider, tracer: Tracer | None = None):
        self.provider = provider
        self._tracer = tracer or Tracer()

    async def compute_hmac(
        self,
        key: SecretKey | KeySource | str | bytes,
        message: Value,
        algorithm: Algorithm | str = DEFAULT_ALGORITHM,
    ) -> str:
        """Return the lowercase hex HMAC of ``message`` under ``key``.

        Raw key material is imported under ``algorithm``. An opaque
        :class:`SecretKey` signs under the algorithm it was bound to when it
        was generated or imported.
        """
        algo = validate_algorithm(algorithm)
        data = to_bytes(message, what="message")
        source = key_source(key)
        secret = await accept_key(self.provider, source, algo)
        return await self.sign_hex(secret, data, algo)

    async def sign_hex(
        self, key: SecretKey, message: bytes, algorithm: Algorithm | None = None
    ) -> str:
        """Sign already-coerced ``message`` with an already-resolved ``key``."""
        if algorithm is not None and algorithm is not key.algorithm:
            logger.debug(
                "key bound to %s, requested %s; signing with %s",
                key.algorithm,
                algorithm,
                key.algorithm,
            )
        with self._tracer.start_span(
            "doublehmac.hmac", algorithm=key.algorithm.value, length=len(message)
        ):
            signature = await call_provider(self.provider.sign, key, message)
        return signature.hex()


__all__ = ["HmacEngine"]
