"""Provider selection.

The backend is chosen once, by name, from ``DOUBLEHMAC_PROVIDER`` (default
``cryptography``). Backends are imported lazily so selecting ``hashlib`` does
not require the ``cryptography`` package.
"""

from __future__ import annotations

import importlib
import logging
import os
import threading
from typing import Dict, Optional, Tuple

from .errors import ProviderNotFound
from .providers.base import CryptoProvider

logger = logging.getLogger(__name__)

ENV_PROVIDER = "DOUBLEHMAC_PROVIDER"
DEFAULT_PROVIDER = "cryptography"

_REGISTRY: Dict[str, Tuple[str, str]] = {
    "cryptography": (
        "doublehmac.providers.cryptography_backend",
        "CryptographyProvider",
    ),
    "hashlib": ("doublehmac.providers.hashlib_backend", "HashlibProvider"),
}

_lock = threading.Lock()
_default: Optional[CryptoProvider] = None


def provider_names() -> list[str]:
    return sorted(_REGISTRY)


def get_provider(name: str | None = None) -> CryptoProvider:
    """Instantiate the provider registered as ``name``.

    ``None`` reads ``DOUBLEHMAC_PROVIDER`` from the environment.
    """
    if name is None:
        name = os.environ.get(ENV_PROVIDER, DEFAULT_PROVIDER)
    key = name.strip().lower()
    try:
        module_name, class_name = _REGISTRY[key]
    except KeyError:
        raise ProviderNotFound(
            f"unknown provider {name!r}; expected one of {', '.join(provider_names())}"
        ) from None
    module = importlib.import_module(module_name)
    return getattr(module, class_name)()


def default_provider() -> CryptoProvider:
    """Return the process-wide provider, resolving it on first use."""
    global _default
    with _lock:
        if _default is None:
            _default = get_provider()
            logger.debug("using %s provider", _default.name)
        return _default


def set_default_provider(provider: CryptoProvider | str | None) -> None:
    """Replace the process-wide provider.

    Pass a provider instance, a registered name, or ``None`` to re-read the
    environment on next use.
    """
    global _default
    if isinstance(provider, str):
        provider = get_provider(provider)
    elif provider is not None and not isinstance(provider, CryptoProvider):
        raise TypeError(f"{provider!r} does not implement CryptoProvider")
    with _lock:
        _default = provider


__all__ = [
    "DEFAULT_PROVIDER",
    "ENV_PROVIDER",
    "default_provider",
    "get_provider",
    "provider_names",
    "set_default_provider",
]
