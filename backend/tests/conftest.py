"""
Membership Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set before any `app` import, so the
       settings singleton and the engine are built for an in-memory
       SQLite database.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── database:        fresh in-memory schema, dropped after the test
    ├── test_client:     HTTPX AsyncClient bound to the app (no schema)
    └── api_client:      test_client on top of `database`
"""

import os

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before the first `app` import: settings and engine are built at import time.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["PASSWORD_SALT"] = "test-salt-value"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import app.models  # noqa: E402,F401
from app.database import Base, engine  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession; no database is touched.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
        result = await department_service.get_by_id(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def database():
    """
    Creates every table in the in-memory database for one test.

    Disposing the engine closes its single StaticPool connection, which
    discards the in-memory database, so each test starts from id 1.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client():
    """HTTPX AsyncClient routed straight into the ASGI app."""
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def api_client(database, test_client):
    """test_client backed by a freshly created schema."""
    yield test_client
