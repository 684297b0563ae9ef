"""
Integration test fixtures.

These tests require a running server backed by a real MongoDB.
Mark with @pytest.mark.integration to skip in normal test runs.
"""
import os

import pytest


@pytest.fixture
def live_site_url():
    """Get base URL of a running portal (if any)."""
    return os.getenv("PORTAL_URL", "http://localhost:3000")


@pytest.fixture
def test_timeout():
    """Timeout for live HTTP requests."""
    return float(os.getenv("TEST_TIMEOUT", "10"))
