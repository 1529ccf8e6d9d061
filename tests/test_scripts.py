from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from bookstore.db import session as db_session
from bookstore.repositories.json_storage import JsonDocumentStore
from bookstore.repositories.sql_storage import SQLDocumentStore

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def sqlite_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    yield url
    db_session.get_engine(url).dispose()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


def test_migrate_copies_whole_document(tmp_path, sqlite_url):
    source = JsonDocumentStore(tmp_path / "data.json")
    document = {
        "books": [{"id": 1, "title": "Dune"}],
        "authors": [{"id": 1, "name": "Frank Herbert", "books": ["1"]}],
        "users": [],
    }
    source.write(document)

    migrate_to_sql = _load_script("migrate_to_sql")
    counts = migrate_to_sql.migrate(str(source.path), sqlite_url)

    assert counts == {"books": 1, "authors": 1, "users": 0}
    assert SQLDocumentStore(sqlite_url).read() == document


def test_migrate_requires_existing_file(tmp_path, sqlite_url):
    migrate_to_sql = _load_script("migrate_to_sql")
    with pytest.raises(SystemExit):
        migrate_to_sql.migrate(str(tmp_path / "missing.json"), sqlite_url)
