"""Pytest configuration for Roster tests."""

from __future__ import annotations

import os

import pytest
import pytest_asyncio

# Point the module-level engine at SQLite before anything imports roster.database
os.environ.setdefault("ROSTER_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")


# ============================================================================
# Test Fixtures for Unit Tests
# ============================================================================


@pytest.fixture
def character_payload():
    """Factory fixture for valid create payloads."""

    def _create(**overrides) -> dict[str, str]:
        payload = {
            "name": "Shuichi Saihara",
            "talent": "Detective",
            "gender": "Male",
            "height": "171 cm",
            "weight": "58 kg",
            "birthday": "September 7",
            "image": "/images/shuichi.jpg",
        }
        payload.update(overrides)
        return payload

    return _create


# ============================================================================
# Database Fixtures (aiosqlite file database per test)
# ============================================================================


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    from sqlalchemy.ext.asyncio import create_async_engine

    from roster.database.base import Base
    from roster.models import Character  # noqa: F401

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'roster.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
