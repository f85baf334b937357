"""Shared test fixtures for daturl tests."""

from __future__ import annotations

import pytest
from nacl.signing import SigningKey

from daturl.protocol.url import DatUrl, parse_dat_url

SAMPLE_KEY = "584faa05d394190ab1a3f0240607f9bf2b7e2bd9968830a11cf77db0cea36a21"


@pytest.fixture()
def sample_key() -> str:
    return SAMPLE_KEY


@pytest.fixture()
def verify_key():
    """Return a freshly generated Ed25519 verify key."""
    return SigningKey.generate().verify_key


@pytest.fixture()
def sample_url_str() -> str:
    return f"dat://{SAMPLE_KEY}+v1.0.0/path/to/file.txt"


@pytest.fixture()
def sample_url(sample_url_str) -> DatUrl:
    return parse_dat_url(sample_url_str)
