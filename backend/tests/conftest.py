"""
DA Admin Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each client fixture builds a fresh app from its own Settings and
       talks to it through httpx's ASGITransport (no server, no lifespan).

Fixtures:
    dev_settings / prod_settings / staging_settings   Settings per environment
    test_client      development app
    prod_client      production app (strict CORS, generic 500s)
    staging_client   neither development nor production
    failing_route    adds GET /api/boom, which raises, to an app
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep the module-level app in admin_api.main quiet and predictable
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["ENVIRONMENT"] = "development"

from admin_api.config import Settings  # noqa: E402
from admin_api.main import create_app  # noqa: E402

FRONTEND_URL = "https://admin.example.com"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Variables from the host shell must not leak into Settings()."""
    for name in ("DATABASE_URL", "DA_DATABASE_URL", "FRONTEND_URL", "VERCEL", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def dev_settings():
    return Settings(_env_file=None, environment="development", log_level="WARNING")


@pytest.fixture
def prod_settings():
    return Settings(
        _env_file=None,
        environment="production",
        frontend_url=FRONTEND_URL,
        log_level="WARNING",
    )


@pytest.fixture
def staging_settings():
    return Settings(_env_file=None, environment="staging", log_level="WARNING")


def _boom():
    raise RuntimeError("database exploded at row 42")


@pytest.fixture
def failing_route():
    """Returns a function that registers GET /api/boom on an app."""

    def install(app):
        app.add_api_route("/api/boom", _boom, methods=["GET"])
        return app

    return install


def _client_for(app):
    # raise_app_exceptions=False keeps the transport from re-raising route faults
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(dev_settings, failing_route):
    client = _client_for(failing_route(create_app(dev_settings)))
    async with client:
        yield client


@pytest_asyncio.fixture
async def prod_client(prod_settings, failing_route):
    client = _client_for(failing_route(create_app(prod_settings)))
    async with client:
        yield client


@pytest_asyncio.fixture
async def staging_client(staging_settings, failing_route):
    client = _client_for(failing_route(create_app(staging_settings)))
    async with client:
        yield client
