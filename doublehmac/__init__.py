"""doublehmac package init.

Timing-safe equality for secrets via double HMAC verification.
"""

from .algorithms import Algorithm, validate_algorithm  # noqa: F401
from .coercion import to_bytes  # noqa: F401
from .comparator import (
    CompareOptions,
    TimingSafeComparator,
    compare_timing_safe,
    compute_hmac,
    generate_secret_key,
)
from .config import default_provider, get_provider, set_default_provider  # noqa: F401
from .engine import HmacEngine  # noqa: F401
from .errors import (
    DoubleHmacError,
    InvalidAlgorithm,
    InvalidInputType,
    InvalidKeyLength,
    ProviderNotFound,
)
from .keys import OpaqueKeyHandle, RawBytes, RawText, SecretKey  # noqa: F401
from .logging import setup_structured_logging  # noqa: F401
from .providers import CryptoProvider  # noqa: F401

__all__ = [
    "compare_timing_safe",
    "generate_secret_key",
    "compute_hmac",
    "TimingSafeComparator",
    "CompareOptions",
    "HmacEngine",
    "Algorithm",
    "validate_algorithm",
    "to_bytes",
    "SecretKey",
    "RawBytes",
    "RawText",
    "OpaqueKeyHandle",
    "CryptoProvider",
    "default_provider",
    "get_provider",
    "set_default_provider",
    "DoubleHmacError",
    "InvalidAlgorithm",
    "InvalidInputType",
    "InvalidKeyLength",
    "ProviderNotFound",
    "setup_structured_logging",
]
