"""Pytest configuration for the Story Spoiler suite.

This configuration provides:
1. Test markers (unit, integration, smoke)
2. The --live option gating smoke tests against the remote API
3. Settings and fake-service fixtures for offline runs
"""

import pytest

from story_spoiler.core.config import Settings
from story_spoiler.core.enums import Environment
from tests.fakes.story_service import FakeStorySpoilerService

FAKE_BASE_URL = "https://story-spoiler.test"


def pytest_addoption(parser):
    """Add the --live switch for running against the real API."""
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run smoke tests against the remote Story Spoiler API",
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Full ordered run against the in-process fake API"
    )
    config.addinivalue_line("markers", "smoke: Ordered run against the remote API")


def pytest_collection_modifyitems(config, items):
    """Skip smoke tests unless --live was given."""
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="needs --live to reach the remote API")
    for item in items:
        if "smoke" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(autouse=True)
def _no_proxy_env(request, monkeypatch):
    """Keep proxy variables from routing offline tests around their mocks."""
    if "smoke" in request.keywords:
        return
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)


@pytest.fixture
def fake_settings() -> Settings:
    """Settings pointing at the fake service, with its credentials."""
    return Settings(
        environment=Environment.DEVELOPMENT,
        api_base_url=FAKE_BASE_URL,
        api_username="ico1",
        api_password="ico1ico1",
        request_timeout=5.0,
    )


@pytest.fixture
def fake_service() -> FakeStorySpoilerService:
    """Fresh in-process Story Spoiler API."""
    return FakeStorySpoilerService()
