"""
Beverage API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── test_settings: Settings instance with test values
    ├── app: Fresh FastAPI app built by create_app()
    └── test_client: HTTPX AsyncClient bound to `app` through ASGITransport
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["CORS_ORIGINS"] = "http://test"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from beverage_api.config import Settings
from beverage_api.main import create_app


@pytest.fixture
def test_settings():
    """Settings with deterministic values, independent of the developer's .env."""
    return Settings(
        _env_file=None,
        app_name="Beverage API (test)",
        log_level="WARNING",
        cors_origins="http://test",
        docs_enabled=True,
    )


@pytest.fixture
def app(test_settings):
    """
    Provides a fresh application instance.

    Tests that need extra routes (e.g. to trigger error handlers) add them here
    without touching the module-level app.
    """
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_hello(test_client):
            response = await test_client.get("/api/hello")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
