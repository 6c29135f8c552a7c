"""Pytest configuration for the test suite.

Settings are read from the environment at import time, so the test
defaults below must be in place before anything imports src.core.config.
"""

import os

from tests.utils.fakes import TEST_SECRET_KEY

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./gigglefest_test.db")
os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from tests.utils.fakes import FixedClock  # noqa: E402


@pytest.fixture
def clock() -> FixedClock:
    """Fresh fixed clock per test."""
    return FixedClock()


@pytest_asyncio.fixture
async def database(tmp_path):
    """Provide a throwaway SQLite database with the schema created.

    Each test gets its own file so nothing leaks between tests.
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real libraries and database"
    )
    config.addinivalue_line("markers", "api: API tests through the FastAPI app")
