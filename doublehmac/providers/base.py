"""Interface between the comparison engine and a cryptographic backend."""

from __future__ import annotations

import asyncio
import functools
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - circular import hints
    from ..algorithms import Algorithm
    from ..keys import SecretKey

T = TypeVar("T")


@runtime_checkable
class CryptoProvider(Protocol):
    """Synchronous HMAC capability injected into the engine.

    Implementations must be safe to call from several threads at once; the
    engine performs no locking. Errors raised here reach the caller
    unwrapped.
    """

    name: str

    def import_key(self, raw: bytes, algorithm: "Algorithm") -> "SecretKey":
        """Bind raw key material to ``algorithm`` for signing."""
        ...

    def sign(self, key: "SecretKey", message: bytes) -> bytes:
        """Return the HMAC of ``message`` under ``key``."""
        ...

    def generate_key(self, algorithm: "Algorithm", length_bits: int) -> "SecretKey":
        """Create a random signing key of ``length_bits`` bits."""
        ...


async def call_provider(func: Callable[..., T], *args: Any) -> T:
    """Run a blocking provider call in the loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args))
