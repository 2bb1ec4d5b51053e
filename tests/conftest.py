"""
Photo API: Test Configuration (conftest.py)
===========================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Inventory (all function-scoped):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── db_engine: Async engine on a fresh in-memory SQLite database
    ├── db_session: Real AsyncSession on db_engine
    ├── mock_photo_service: PhotoService replaced inside the photo routes
    ├── sample_photo_data: Valid photo payload (JSON-shaped)
    ├── sample_photo_response: PhotoResponse as the service would return it
    ├── test_client: HTTPX AsyncClient wired to the app, DB dependency mocked
    └── live_client: HTTPX AsyncClient wired to the app and db_engine
"""

import os

# Settings are read at import time, so the environment is set before any
# photoapi import.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENABLE_FAKE_ENDPOINT"] = "true"
os.environ["RATE_LIMIT_REQUESTS"] = "100000"

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from photoapi.database import Base, get_db_session
from photoapi.models.photo import Photo  # noqa: F401
from photoapi.schemas.photo import PhotoResponse


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_count(mock_db_session):
            mock_db_session.execute.return_value.scalar.return_value = 3
            assert await photo_service.count(mock_db_session) == 3
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """
    Provides an async engine on a fresh in-memory SQLite database.

    StaticPool keeps the single in-memory connection alive for the whole test,
    so the schema created here is the one every session sees.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Provides a real AsyncSession on the db_engine database."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_photo_service():
    """
    Replaces the PhotoService used by the photo routes.

    Every data-access method is an AsyncMock, so tests can assert whether the
    data layer was called at all.
    """
    service = MagicMock()
    for name in (
        "create",
        "get_filtered",
        "count",
        "get_one",
        "update_one",
        "replace_one",
        "delete_one",
    ):
        setattr(service, name, AsyncMock())
    with patch("photoapi.routes.photos.photo_service", service):
        yield service


@pytest.fixture
def sample_photo_data():
    """A valid photo payload as a client would send it."""
    return {
        "price": "49.90",
        "url": "https://images.example.com/sunset.jpg",
        "date": "2024-06-01T18:30:00+00:00",
        "theme": "sunset",
    }


@pytest.fixture
def sample_photo_response():
    """A PhotoResponse as PhotoService would return it."""
    now = datetime.now(timezone.utc)
    return PhotoResponse(
        id=uuid4(),
        price=Decimal("49.90"),
        url="https://images.example.com/sunset.jpg",
        date=datetime(2024, 6, 1, 18, 30, tzinfo=timezone.utc),
        theme="sunset",
        created_at=now,
        updated_at=now,
    )


@pytest_asyncio.fixture
async def test_client(mock_db_session):
    """
    Provides an async HTTP test client for endpoint testing.

    The database dependency yields mock_db_session, so no request reaches a
    real database unless a test sets that up itself.

    Usage:
        async def test_get(test_client, mock_photo_service):
            response = await test_client.get("/api/photos/...")
    """
    from photoapi.main import app

    async def _override_db_session():
        yield mock_db_session

    app.dependency_overrides[get_db_session] = _override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def live_client(db_engine, monkeypatch):
    """
    Provides an HTTPX AsyncClient that runs requests through the real data layer.

    get_db_session is not overridden: each request opens its own session on
    db_engine, so commit and rollback happen exactly as in production.
    """
    from photoapi import database
    from photoapi.main import app

    monkeypatch.setattr(
        database,
        "async_session_factory",
        async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False),
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
