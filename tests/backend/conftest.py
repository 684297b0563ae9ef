"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for driving the
signup/login forms and for preparing users directly in the database.
"""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio


# =============================================================================
# Form Helpers
# =============================================================================

@pytest.fixture
def signup_request():
    """
    POST the signup form.

    Usage in tests:
        response = await signup_request(async_client, "alice", "a@x.com", "pw1")
    """
    async def _signup(client, username: str, email: str, password: str):
        return await client.post(
            "/signup",
            data={"username": username, "email": email, "password": password},
        )
    return _signup


@pytest.fixture
def login_request():
    """POST the login form."""
    async def _login(client, email: str, password: str):
        return await client.post(
            "/login",
            data={"email": email, "password": password},
        )
    return _login


# =============================================================================
# Database Helpers
# =============================================================================

@pytest.fixture
def set_user_type(mock_portal_db):
    """Change a user's role straight in the database."""
    async def _set(username: str, user_type: str):
        await mock_portal_db.users.update_one(
            {"username": username},
            {"$set": {"user_type": user_type}},
        )
    return _set


@pytest_asyncio.fixture
async def admin_client(async_client, test_admin_data, signup_request, login_request, set_user_type):
    """A client logged in as an admin user."""
    await signup_request(async_client, **test_admin_data)
    await set_user_type(test_admin_data["username"], "admin")
    await login_request(
        async_client,
        test_admin_data["email"],
        test_admin_data["password"],
    )
    return async_client


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(mock_portal_db):
    from portal.services.auth_service import AuthService
    return AuthService(mock_portal_db)


@pytest.fixture
def session_service(mock_portal_db):
    from portal.services.session_service import SessionService
    return SessionService(mock_portal_db)


@pytest.fixture
def other_secret_settings():
    """Settings stand-in with different secrets than the real ones."""
    from portal.config import get_settings

    real = get_settings()
    settings = MagicMock()
    settings.session_secret = "another-signing-secret"
    settings.session_encryption_secret = "another-encryption-secret"
    settings.session_signing_algorithm = real.session_signing_algorithm
    return settings
