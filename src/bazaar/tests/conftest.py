"""
Core pytest configuration for the entire test suite.

Only the database setup and logging installation shared by ALL tests live here.
Domain fixtures are in:
- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/service_fixtures.py
- tests/test_fixtures/api_fixtures.py
and are imported at the bottom of this module so every test can use them.
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import os
import logging
from pathlib import Path
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning
# -------------------------------
# Silence noisy third-party loggers before anything imports them.
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
    "asyncio",
    "httpx",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine,
)

from bazaar.core.logging.builder import setup_logging
from bazaar.database.base import Base
import bazaar.models  # noqa: F401 – import to register models with Base.metadata
from .test_fixtures.settings import make_test_settings

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install application logging once for the whole test session, so the
    request-id and redaction filters the code relies on are active.
    """
    setup_logging(make_test_settings())
    yield


# ------------------------------------------------------------------------------------------------
# Determining the Test Database URL
# ------------------------------------------------------------------------------------------------


def safe_log_db_url(db_url: str) -> str:
    """
    Return the database URL without credentials, for logging.
    """
    parsed = urlparse(db_url)
    if parsed.hostname is None:
        return f"{parsed.scheme}://{parsed.path}"
    return f"{parsed.scheme}://{parsed.hostname}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url(tmp_path: Path) -> str:
    """
    1. `TEST_DATABASE_URL` environment variable (CI/CD override, e.g. a Postgres service)
    2. otherwise a throw-away SQLite file inside the test's tmp_path
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url
    return f"sqlite+aiosqlite:///{tmp_path / 'test_database.db'}"


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    url = get_test_database_url(tmp_path)
    logger.debug(f"Using test DB: {safe_log_db_url(url)}")
    return url


@pytest.fixture
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh schema per test. Services commit, so isolation comes from
    creating and dropping the tables around every test rather than from a rollback.
    """
    engine = create_async_engine(database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    maker = async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session


# Domain fixtures, registered globally
from .test_fixtures.repository_fixtures import (  # noqa: E402,F401
    user_repository,
    sample_user_data,
    create_user,
    created_user,
    multiple_users,
)
from .test_fixtures.service_fixtures import user_service  # noqa: E402,F401
from .test_fixtures.api_fixtures import app, client  # noqa: E402,F401
