"""Cryptographic provider backends.

Backends are looked up by name through :mod:`doublehmac.config`; this package
only exports the interface so importing it never pulls in a backend library.
"""

from .base import CryptoProvider, call_provider

__all__ = ["CryptoProvider", "call_provider"]
