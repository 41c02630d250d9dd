"""Pytest configuration and shared fixtures."""

import base64
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add project root so tests run without an editable install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from forgejo_mcp.dispatcher import ToolDispatcher  # noqa: E402


@pytest.fixture
def temp_dir(tmp_path):
    """Return a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def api_client():
    """Return a stand-in for APIClient whose request() is an AsyncMock."""
    client = AsyncMock()
    client.request = AsyncMock(return_value={})
    return client


@pytest.fixture
def dispatcher(api_client):
    """Return a dispatcher wired to the stubbed API client."""
    return ToolDispatcher(api_client)


@pytest.fixture
def b64():
    """Encode text the way the contents endpoint does."""

    def encode(text: str) -> str:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    return encode


@pytest.fixture(autouse=True)
def setup_env():
    """Isolate tests from the caller's Forgejo environment."""
    # Save original values
    original_env = dict(os.environ)

    for key in ("FORGEJO_BASE_URL", "FORGEJO_TOKEN", "FORGEJO_TIMEOUT", "FORGEJO_CONFIG", "FORGEJO_LOG_LEVEL"):
        os.environ.pop(key, None)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
