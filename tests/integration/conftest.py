"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_DOCPART_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_DOCPART_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_DOCPART_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def server_url() -> str:
    return os.environ.get("DOCPART_SERVER_URL", "http://localhost:8000")


@pytest.fixture
def api_key() -> str | None:
    return os.environ.get("DOCPART_API_KEY")
