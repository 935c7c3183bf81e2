import sys
import threading
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from doublehmac import config
from doublehmac.providers.cryptography_backend import CryptographyProvider


class CountingProvider:
    """Wrap a provider and count calls per operation."""

    def __init__(self, inner=None):
        self.inner = inner or CryptographyProvider()
        self.name = f"counting-{self.inner.name}"
        self.calls = {"import_key": 0, "sign": 0, "generate_key": 0}
        self._lock = threading.Lock()

    def _count(self, op):
        with self._lock:
            self.calls[op] += 1

    def import_key(self, raw, algorithm):
        self._count("import_key")
        return self.inner.import_key(raw, algorithm)

    def sign(self, key, message):
        self._count("sign")
        return self.inner.sign(key, message)

    def generate_key(self, algorithm, length_bits):
        self._count("generate_key")
        return self.inner.generate_key(algorithm, length_bits)


@pytest.fixture
def counting_provider():
    return CountingProvider()


@pytest.fixture(autouse=True)
def reset_default_provider():
    yield
    config.set_default_provider(None)
