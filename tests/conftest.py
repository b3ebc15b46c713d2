"""Pytest configuration and fixtures for the Framer plugin server tests."""

import pytest

from framer_plugin_mcp.config import get_settings


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch):
    """Keep environment-driven settings from leaking between tests."""
    for var in ("FRAMER_PLUGIN_LOG_LEVEL", "FRAMER_PLUGIN_BUILD_COMMAND", "FRAMER_PLUGIN_BUILD_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
