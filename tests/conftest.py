"""
Global test fixtures for the Members Portal.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test user data
- FastAPI app with the database dependency overridden
- Async HTTP client with a cookie jar
"""

import os
import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Cheap hashes for tests; read when portal.core.security is first imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_portal_db(mock_async_mongo_client):
    """Provide mock portal database."""
    from portal.config import get_settings

    db = mock_async_mongo_client[get_settings().mongodb_database]
    yield db


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic signup form data."""
    return {
        "username": "alice",
        "email": "a@x.com",
        "password": "pw1",
    }


@pytest.fixture
def test_admin_data() -> dict:
    """Signup form data for a user the tests promote to admin."""
    return {
        "username": "root",
        "email": "admin@example.com",
        "password": "AdminPassword1",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_portal_db):
    """
    FastAPI app whose routes talk to the mock database.

    The lifespan is not run, so no real MongoDB connection is attempted.
    """
    from portal.database.connections import get_database
    from portal.main import app

    async def _get_mock_database():
        return mock_portal_db

    app.dependency_overrides[get_database] = _get_mock_database
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator:
    """
    Create an async test client.

    Redirects are not followed, so tests can assert on them.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def second_client(app) -> AsyncGenerator:
    """Another browser with its own cookie jar."""
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def session_cookie_name() -> str:
    from portal.config import get_settings
    return get_settings().session_cookie_name
