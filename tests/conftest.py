import os

# Settings are read at import time; keep tests off AWS and away from the real database.
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")
os.environ.setdefault("WEATHERDESK_DB_URL", "sqlite:///./weatherdesk-test.db")

import pytest
from fastapi.testclient import TestClient

from weatherdesk.config import settings
from weatherdesk.db import open_storage
from weatherdesk.main import app
from weatherdesk.services import HistoryStore


@pytest.fixture()
def storage(tmp_path):
    storage = open_storage(f"sqlite:///{tmp_path}/history.db")
    try:
        yield storage
    finally:
        storage.dispose()


@pytest.fixture()
def store(storage):
    return HistoryStore(storage)


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path}/api.db")
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
