"""
Test configuration and fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.models.base import Base
from app.core.database import Database, enable_sqlite_foreign_keys, get_database


# Test database configuration
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine"""
    engine = enable_sqlite_foreign_keys(create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False
    ))

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    await engine.dispose()


@pytest.fixture
async def database(test_engine: AsyncEngine) -> Database:
    """Database handle bound to the test engine"""
    return Database(test_engine)


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with the database dependency overridden"""
    app.dependency_overrides[get_database] = lambda: database

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def organizer_payload() -> dict:
    return {
        "name": "Tech Events Brasil",
        "email": "contato@techevents.com.br",
        "contact_phone": "11987654321"
    }


@pytest.fixture
def participant_payload() -> dict:
    return {
        "full_name": "Ana Maria Silva",
        "email": "ana.silva@example.com",
        "phone": "11991234567",
        "date_of_birth": "1990-05-20",
        "profile": {"interesses": ["IA", "Cloud"], "newsletter": True}
    }
