"""Pytest configuration for E2E tests.

The FastAPI app runs in-process through ``httpx.ASGITransport`` with its
session dependency pointed at a per-test SQLite database.
"""

from __future__ import annotations

import pytest_asyncio


@pytest_asyncio.fixture
async def app(session_factory):
    """Create FastAPI app for E2E testing."""
    from roster.database.session import get_db_session
    from roster.main import create_app

    async def _session_override():
        async with session_factory() as session:
            yield session

    test_app = create_app()
    test_app.dependency_overrides[get_db_session] = _session_override
    yield test_app
    test_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    """Async HTTP client for E2E tests."""
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def api_client(app):
    """CharacterApiClient wired to the in-process app."""
    from httpx import ASGITransport

    from roster.client import CharacterApiClient

    client = CharacterApiClient("http://test/api", transport=ASGITransport(app=app))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def create_character(async_client):
    """Helper that POSTs a character and returns the created record."""

    async def _create(payload: dict) -> dict:
        response = await async_client.post("/api/characters", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
