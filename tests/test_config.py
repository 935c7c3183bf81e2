import pytest

from doublehmac import config
from doublehmac.errors import ProviderNotFound
from doublehmac.providers.cryptography_backend import CryptographyProvider
from doublehmac.providers.hashlib_backend import HashlibProvider


def test_default_is_cryptography(monkeypatch):
    monkeypatch.delenv(config.ENV_PROVIDER, raising=False)
    assert isinstance(config.get_provider(), CryptographyProvider)


def test_env_selects_provider(monkeypatch):
    monkeypatch.setenv(config.ENV_PROVIDER, " HashLib ")
    assert isinstance(config.get_provider(), HashlibProvider)


def test_unknown_provider(monkeypatch):
    monkeypatch.setenv(config.ENV_PROVIDER, "webcrypto")
    with pytest.raises(ProviderNotFound) as excinfo:
        config.get_provider()
    assert "cryptography" in str(excinfo.value)
    with pytest.raises(LookupError):
        config.get_provider("nope")


def test_default_provider_resolved_once(monkeypatch):
    monkeypatch.setenv(config.ENV_PROVIDER, "hashlib")
    config.set_default_provider(None)
    first = config.default_provider()
    monkeypatch.setenv(config.ENV_PROVIDER, "cryptography")
    assert config.default_provider() is first
    assert first.name == "hashlib"


def test_set_default_provider_by_name():
    config.set_default_provider("hashlib")
    assert config.default_provider().name == "hashlib"


def test_set_default_provider_rejects_non_provider():
    with pytest.raises(TypeError):
        config.set_default_provider(object())


def test_provider_names():
    assert config.provider_names() == ["cryptography", "hashlib"]
