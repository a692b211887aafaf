"""Pytest fixtures for API integration tests."""

import httpx
import pytest
import pytest_asyncio

from tests.shared.fixtures.database import TEST_DATABASE_URL
from usermgmt.infrastructure.persistence.sqlalchemy.database import (
    create_session_maker,
)
from usermgmt.presentation.api.app import API_V1_PREFIX, create_app
from usermgmt.presentation.api.dependencies import get_db_session
from usermgmt_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest_asyncio.fixture
async def test_client(api_settings, async_engine):
    """HTTP client bound to the app with an in-memory, seeded database."""
    app = create_app(settings=api_settings)
    test_session_maker = create_session_maker(async_engine)

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def alice_payload() -> dict:
    """Create-profile body for an Admin user."""
    return {
        "name": "Alice",
        "email": "alice@x.com",
        "role_id": 2,
        "bio": "First user",
        "receive_newsletter": True,
    }
