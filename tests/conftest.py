"""Shared pytest configuration."""

import pytest


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def clean_compass_env(monkeypatch):
    """Remove COMPASS and proxy variables that would leak into configs."""
    for var in [
        "COMPASS_SSL_VERIFY",
        "COMPASS_TIMEOUT",
        "COMPASS_HTTP_PROXY",
        "COMPASS_HTTPS_PROXY",
        "COMPASS_SOCKS_PROXY",
        "COMPASS_NO_PROXY",
        "COMPASS_CUSTOM_HEADERS",
        "HTTP_PROXY",
        "HTTPS_PROXY",
        "SOCKS_PROXY",
        "NO_PROXY",
    ]:
        monkeypatch.delenv(var, raising=False)
