"""
Shared fixtures for edsign tests.

The reference keypair is derived from SHA-256("ABCDE"), and the reference
message is the canonical JSON encoding of {"field": "value"}.
"""
import hashlib

import pytest
import structlog

from edsign.canonical import canonicalize
from edsign.service import SigningService


@pytest.fixture(autouse=True)
def reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def service():
    return SigningService()


@pytest.fixture
def seed():
    return hashlib.sha256("ABCDE".encode("utf-8")).digest()


@pytest.fixture
def keys(service, seed):
    return service.derive_keypair(seed)


@pytest.fixture
def message_to_sign():
    return {"field": "value"}


@pytest.fixture
def message(message_to_sign):
    return canonicalize(message_to_sign)


@pytest.fixture
def signature(service, message, keys):
    return service.sign(message, keys.private_key)
