"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/            # Domain, persistence, services, config and CLI
    ├── integration/     # HTTP API against an in-memory database
    └── shared/          # Shared fixtures

Every test runs against in-memory SQLite (aiosqlite), so nothing is
auto-skipped.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    async_session,
    empty_engine,
    session_maker,
)
from usermgmt_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings around every test so env overrides apply."""
    clear_settings_cache()
    yield
    clear_settings_cache()
