import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import settings
from catalog_api.app.core.db import init_db
from catalog_api.app.main import create_app


@pytest.fixture
def database(monkeypatch, tmp_path):
    """Point the notes storage at a fresh SQLite file."""
    db_path = tmp_path / "catalog.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def client(database):
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
