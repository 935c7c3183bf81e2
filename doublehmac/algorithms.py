"""Supported HMAC hash algorithms."""

from __future__ import annotations

import enum

from .errors import InvalidAlgorithm


class Algorithm(str, enum.Enum):
    """Hash functions an HMAC key or signature may be bound to.

    Values are the WebCrypto-style names accepted at the public API.
    """

    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hashlib_name(self) -> str:
        return self.value.replace("-", "").lower()

    def __str__(self) -> str:
        return self.value


_DIGEST_SIZES = {
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
}

DEFAULT_ALGORITHM = Algorithm.SHA256


def validate_algorithm(algorithm: Algorithm | str) -> Algorithm:
    """Return the :class:`Algorithm` named by ``algorithm``.

    Raises :class:`InvalidAlgorithm` for anything other than the four
    supported identifiers. Matching is exact: ``"sha256"`` is rejected.
    """
    if isinstance(algorithm, Algorithm):
        return algorithm
    if isinstance(algorithm, str):
        try:
            return Algorithm(algorithm)
        except ValueError:
            pass
    raise InvalidAlgorithm(algorithm)


__all__ = ["Algorithm", "DEFAULT_ALGORITHM", "validate_algorithm"]
