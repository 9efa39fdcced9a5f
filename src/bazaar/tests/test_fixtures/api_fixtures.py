"""Fixtures for HTTP-level tests."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from bazaar.main import create_app

from .settings import make_test_settings


@pytest.fixture
def app(tmp_path: Path) -> FastAPI:
    """
    A full application bound to its own SQLite file; tables are created by the lifespan.
    """
    settings = make_test_settings(
        DATABASE_URL_OVERRIDE=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
    )
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI):
    # Entering the context runs the lifespan (schema creation / engine disposal)
    with TestClient(app) as test_client:
        yield test_client
