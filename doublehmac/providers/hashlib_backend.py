"""HMAC provider using the standard library ``hmac`` module.

Useful where the ``cryptography`` wheel is unavailable. Digests are
identical to :class:`~doublehmac.providers.cryptography_backend.CryptographyProvider`.
"""

from __future__ import annotations

import hmac
import secrets

from ..algorithms import Algorithm
from ..keys import SecretKey


class HashlibProvider:
    name = "hashlib"

    def import_key(self, raw: bytes, algorithm: Algorithm) -> SecretKey:
        if not raw:
            raise ValueError("HMAC key data must not be empty")
        return SecretKey(algorithm=algorithm, length_bits=len(raw) * 8, handle=bytes(raw))

    def generate_key(self, algorithm: Algorithm, length_bits: int) -> SecretKey:
        if length_bits <= 0 or length_bits % 8:
            raise ValueError(f"unsupported HMAC key length: {length_bits} bits")
        return SecretKey(
            algorithm=algorithm,
            length_bits=length_bits,
            handle=secrets.token_bytes(length_bits // 8),
        )

    def sign(self, key: SecretKey, message: bytes) -> bytes:
        if "sign" not in key.usages:
            raise ValueError("key does not permit signing")
        if not isinstance(key.handle, bytes):
            raise TypeError("key handle was not created by a byte-keyed provider")
        return hmac.new(key.handle, message, key.algorithm.hashlib_name).digest()
