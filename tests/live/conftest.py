"""Fixtures for live API tests.

These tests require a real server, configured via environment variables:
- ARTIFACTORY_URL: Artifactory base URL, e.g. https://example.jfrog.io/artifactory
- ARTIFACTORY_TOKEN, or ARTIFACTORY_USERNAME and ARTIFACTORY_PASSWORD
- ARTIFACTORY_TEST_REPO: a local repository the tests may write to
- XRAY_URL and XRAY_TOKEN: Xray base URL and token
"""

import os
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from arty import ArtifactoryClient, AsyncArtifactoryClient, AsyncXrayClient, XrayClient


def has_artifactory_credentials() -> bool:
    """Check if Artifactory credentials are available."""
    if not os.getenv("ARTIFACTORY_URL"):
        return False
    basic = os.getenv("ARTIFACTORY_USERNAME") and os.getenv("ARTIFACTORY_PASSWORD")
    return bool(os.getenv("ARTIFACTORY_TOKEN") or basic)


def has_xray_credentials() -> bool:
    """Check if Xray credentials are available."""
    return bool(os.getenv("XRAY_URL") and os.getenv("XRAY_TOKEN"))


def _artifactory_kwargs() -> dict[str, str]:
    if not has_artifactory_credentials():
        pytest.skip("Requires ARTIFACTORY_URL and ARTIFACTORY_TOKEN (or username/password)")
    if os.getenv("ARTIFACTORY_TOKEN"):
        return {}
    return {
        "username": os.environ["ARTIFACTORY_USERNAME"],
        "password": os.environ["ARTIFACTORY_PASSWORD"],
    }


@pytest.fixture
def artifactory_client() -> Generator[ArtifactoryClient, None, None]:
    """Artifactory client configured from the environment."""
    with ArtifactoryClient(**_artifactory_kwargs()) as client:
        yield client


@pytest_asyncio.fixture
async def async_artifactory_client() -> AsyncGenerator[AsyncArtifactoryClient, None]:
    """Async Artifactory client configured from the environment."""
    async with AsyncArtifactoryClient(**_artifactory_kwargs()) as client:
        yield client


@pytest.fixture
def test_repo() -> str:
    """Get the writable test repository from the environment."""
    repo = os.getenv("ARTIFACTORY_TEST_REPO")
    if not repo:
        pytest.skip("ARTIFACTORY_TEST_REPO environment variable not set")
    return repo


@pytest.fixture
def xray_client() -> Generator[XrayClient, None, None]:
    if not has_xray_credentials():
        pytest.skip("Requires XRAY_URL and XRAY_TOKEN environment variables")
    with XrayClient() as client:
        yield client


@pytest_asyncio.fixture
async def async_xray_client() -> AsyncGenerator[AsyncXrayClient, None]:
    if not has_xray_credentials():
        pytest.skip("Requires XRAY_URL and XRAY_TOKEN environment variables")
    async with AsyncXrayClient() as client:
        yield client
