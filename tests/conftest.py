# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from api import endpoints
from hybrid_crypto_package import generate_rsa_keypair
from main import app as main_app
from security.key_provider import KeyProvider


# --- Key fixtures ---
# Ephemeral key pairs, generated once per session and never written to disk.
@pytest.fixture(scope="session")
def key_pair():
    """(public_pem, private_pem) of the recipient."""
    return generate_rsa_keypair(2048)


@pytest.fixture(scope="session")
def other_key_pair():
    """A second, unrelated key pair for mismatch tests."""
    return generate_rsa_keypair(2048)


@pytest.fixture
def public_key(key_pair):
    return key_pair[0]


@pytest.fixture
def private_key(key_pair):
    return key_pair[1]


@pytest.fixture
def key_provider(key_pair):
    public_pem, private_pem = key_pair
    return KeyProvider(public_key_pem=public_pem, private_key_pem=private_pem)


# --- API fixtures ---
@pytest.fixture
def client(key_provider):
    """TestClient whose requests use the ephemeral key pair instead of environment keys."""
    main_app.dependency_overrides[endpoints.get_key_provider] = lambda: key_provider
    with TestClient(main_app) as test_client:
        yield test_client
    main_app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    """TestClient whose KeyProvider has no keys at all."""
    main_app.dependency_overrides[endpoints.get_key_provider] = lambda: KeyProvider()
    with TestClient(main_app) as test_client:
        yield test_client
    main_app.dependency_overrides.clear()
