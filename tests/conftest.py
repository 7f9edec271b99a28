"""Shared fixtures for all tests."""

import time
import uuid
from collections.abc import Generator

import pytest

ARTIFACTORY_BASE = "https://art.example.com/artifactory"
XRAY_BASE = "https://xray.example.com/xray"


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear all Artifactory and Xray environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    env_vars_to_clear = [
        "ARTIFACTORY_URL",
        "ARTIFACTORY_TOKEN",
        "ARTIFACTORY_USERNAME",
        "ARTIFACTORY_PASSWORD",
        "XRAY_URL",
        "XRAY_TOKEN",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_token() -> str:
    """Mock API token for testing."""
    return "test_token_123456789"


@pytest.fixture
def artifactory_base_url() -> str:
    return ARTIFACTORY_BASE


@pytest.fixture
def xray_base_url() -> str:
    return XRAY_BASE


@pytest.fixture
def unique_test_name() -> str:
    """Generate a unique test resource name with timestamp."""
    timestamp = int(time.time())
    unique_id = uuid.uuid4().hex[:8]
    return f"arty-test-{timestamp}-{unique_id}"
