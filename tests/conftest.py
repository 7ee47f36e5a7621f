"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, KsuidConfig
from ui.app import create_app


@pytest.fixture
def config():
    """Create test config."""
    return Config(ksuid=KsuidConfig(default_variant="ksuid", max_batch=10))


@pytest.fixture
async def app(config):
    """Create test FastAPI app."""
    return create_app(config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
