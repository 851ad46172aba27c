"""
Pytest fixtures shared by the API and CRUD tests.

Every test gets its own SQLite file under `tmp_path`, so records never leak
between tests and no explicit teardown is needed.
"""

import pytest
from fastapi.testclient import TestClient

from roster_service.app.main import create_app
from roster_service.config import Settings
from roster_service.db.session import Database


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'roster.db'}",
        cors_origins=["http://localhost:5173"],
        log_level="WARNING",
        sql_echo=False,
    )


@pytest.fixture
def client(settings):
    """HTTP client for an app whose lifespan (store connect/disconnect) has run."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def db(settings):
    """A session on a freshly connected store, for exercising the CRUD layer directly."""
    database = Database(settings.database_url)
    await database.connect()
    async with database.session() as session:
        yield session
    await database.disconnect()
