from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the bookstore package importable for direct pytest runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bookstore.app import create_app  # noqa: E402
from bookstore.core import config as core_config  # noqa: E402


@pytest.fixture()
def app_env(tmp_path, monkeypatch):
    """Point the settings at a temporary data file and reset the settings cache."""
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "data.json"))
    monkeypatch.setenv("OPENAPI_OUTPUT", str(tmp_path / "swagger-definition.json"))
    for name in ("DATA_BACKEND", "DATABASE_URL", "STORE_LOCKING", "APP_ENV", "PUBLIC_BASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(app_env):
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def store(client):
    return client.app.state.store
