"""
Stockroom Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked sessions, seeded database, API client).

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── make_result: Builds fake query results for mock_db_session
    ├── sample_rows: Copy of the rows seeded into the test database
    ├── seeded_engine: Temporary SQLite database holding SAMPLE_ROWS
    ├── empty_engine: Temporary SQLite database without the stuff table
    ├── test_client: HTTPX AsyncClient wired to seeded_engine
    ├── broken_client: HTTPX AsyncClient wired to empty_engine
    ├── json_mode / auto_mode: Switch the response renderer
"""

import os
import tempfile

# Override settings for testing BEFORE any stockroom imports
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="stockroom_test_"), "app.db")
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RESPONSE_MODE"] = "html"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from stockroom.config import settings
from stockroom.database import build_engine, create_tables, get_db_session
from stockroom.models.stuff import StuffItem


SAMPLE_ROWS = [
    {"id": 1, "item": "Hammer", "quantity": 10, "description": "Steel hammer"},
    {"id": 2, "item": "Nail", "quantity": 500, "description": "Box of nails"},
]


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value = make_result(rows)  # make_result fixture
        result = await inventory_service.list_items(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def sample_rows():
    """The rows seeded_engine holds, description included."""
    return [dict(row) for row in SAMPLE_ROWS]


@pytest.fixture
def make_result():
    """Builds a stand-in for a SQLAlchemy Result whose mappings() yield the given rows."""
    def _make(rows):
        result = MagicMock()
        result.mappings.return_value.all.return_value = rows
        return result
    return _make


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def seeded_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """A throwaway SQLite database with the stuff table and SAMPLE_ROWS."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'stuff.db'}")
    await create_tables(engine)
    async with engine.begin() as conn:
        await conn.execute(StuffItem.__table__.insert(), SAMPLE_ROWS)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def empty_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """A SQLite database with no tables; every inventory query fails."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    yield engine
    await engine.dispose()


def _override_session(engine: AsyncEngine):
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _get_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            yield session

    return _get_session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(seeded_engine):
    """
    Provides an async HTTP client talking to the app over the seeded database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/stuff")
            assert response.status_code == 200
    """
    from stockroom.main import app

    app.dependency_overrides[get_db_session] = _override_session(seeded_engine)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client(empty_engine):
    """Same as test_client, but the database has no stuff table."""
    from stockroom.main import app

    app.dependency_overrides[get_db_session] = _override_session(empty_engine)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def json_mode(monkeypatch):
    """Serve bare JSON bodies for the duration of the test."""
    monkeypatch.setattr(settings, "response_mode", "json")


@pytest.fixture
def auto_mode(monkeypatch):
    """Pick the renderer from the Accept header for the duration of the test."""
    monkeypatch.setattr(settings, "response_mode", "auto")
