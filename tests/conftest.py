"""Shared test fixtures.

Provides isolated settings pointing at a temporary SQLite file and public
directory, a FastAPI ``TestClient`` (with and without default content) and
an open ``Database`` for service-level tests.
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.config import settings
from app.db.schema import init_schema
from app.db.sqlite import Database


@pytest.fixture()
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point storage and uploads at *tmp_path*; seeding disabled."""
    monkeypatch.setattr(settings, "DATABASE_PATH", str(tmp_path / "database" / "portfolio.db"))
    monkeypatch.setattr(settings, "PUBLIC_DIR", str(tmp_path / "public"))
    monkeypatch.setattr(settings, "SEED_DEFAULTS", False)
    return tmp_path


@pytest.fixture()
def test_client(isolated_settings: Path) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient over an empty database."""
    from app.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture()
def seeded_client(
    isolated_settings: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient over a database holding the default content."""
    monkeypatch.setattr(settings, "SEED_DEFAULTS", True)
    from app.main import app

    with TestClient(app) as client:
        yield client


@pytest_asyncio.fixture()
async def db(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """Provide a connected Database with all tables created."""
    database = Database(tmp_path / "portfolio.db")
    await database.connect()
    await init_schema(database)
    try:
        yield database
    finally:
        await database.close()
