"""HMAC provider backed by the ``cryptography`` package."""

from __future__ import annotations

import os

from cryptography.hazmat.primitives import hashes, hmac

from ..algorithms import Algorithm
from ..keys import SecretKey

_HASHES = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA384: hashes.SHA384,
    Algorithm.SHA512: hashes.SHA512,
}


class CryptographyProvider:
    """Default provider using OpenSSL through ``cryptography``.

    Key handles are the raw key bytes; a fresh :class:`hmac.HMAC` context is
    built for every signature so concurrent calls share no state.
    """

    name = "cryptography"

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
            handle=os.urandom(length_bits // 8),
        )

    def sign(self, key: SecretKey, message: bytes) -> bytes:
        if "sign" not in key.usages:
            raise ValueError("key does not permit signing")
        if not isinstance(key.handle, bytes):
            raise TypeError("key handle was not created by a byte-keyed provider")
        ctx = hmac.HMAC(key.handle, _HASHES[key.algorithm]())
        ctx.update(message)
        return ctx.finalize()
