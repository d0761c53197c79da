"""Shared fixtures for nano-banana-mcp tests."""

import os
import tempfile

import pytest

# Set dummy API key and keep logs out of the home directory
os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("NANO_BANANA_MCP_LOG_DIR", tempfile.mkdtemp(prefix="nano-banana-logs-"))


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Re-read the environment in every test."""
    from nano_banana_mcp.config.settings import get_settings
    from nano_banana_mcp.server import get_client

    get_settings.cache_clear()
    get_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_client.cache_clear()
