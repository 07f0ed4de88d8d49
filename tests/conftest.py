"""Shared fixtures: settings and clients."""

from collections.abc import AsyncIterator

import pytest

from spoticlient.application.clients.client import Client
from spoticlient.config.settings import Settings

from records import API


@pytest.fixture
def settings() -> Settings:
    """Settings that suppress errors (the default behaviour)."""
    return Settings(api_base_url=API, timeout=5.0, throw_errors=False)


@pytest.fixture
def throwing_settings() -> Settings:
    """Settings that raise UnexpectedError on failure."""
    return Settings(api_base_url=API, timeout=5.0, throw_errors=True)


@pytest.fixture
async def client(settings: Settings) -> AsyncIterator[Client]:
    """Client with error suppression."""
    client = Client("test-token", settings)
    yield client
    await client.close()


@pytest.fixture
async def throwing_client(throwing_settings: Settings) -> AsyncIterator[Client]:
    """Client that raises UnexpectedError."""
    client = Client("test-token", throwing_settings)
    yield client
    await client.close()
