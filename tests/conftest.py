# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides app and client fixtures wired to the stub auth router
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing leetlab.main which builds the app immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from leetlab.config import Settings, get_settings
from leetlab.main import create_app
from leetlab.routing import load_router

COOKIE_SECRET = "test-cookie-secret"
STUB_ROUTER = "tests.auth_stub:router"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_settings():
    """Build Settings without reading a .env file."""
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def test_settings(make_settings):
    """Settings with a cookie secret and the stub auth router."""
    return make_settings(PORT=3000, COOKIE_SECRET=COOKIE_SECRET, AUTH_ROUTER=STUB_ROUTER)


@pytest.fixture
def app(test_settings):
    """Application wired to the stub auth router."""
    return create_app(settings=test_settings, auth_router=load_router(STUB_ROUTER))


@pytest.fixture
def client(app):
    """Test client that returns 500 responses instead of raising."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def clear_settings_cache():
    """Reset the cached settings around a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
