from __future__ import annotations

import json
import os
import stat

import pytest

from bookstore.core.errors import DataReadError, DataWriteError
from bookstore.repositories.document_store import empty_document
from bookstore.repositories.json_storage import JsonDocumentStore


def test_initialize_creates_empty_document_once(tmp_path):
    store = JsonDocumentStore(tmp_path / "data.json")
    assert store.initialize() is True
    assert store.read() == {"books": [], "authors": [], "users": []}
    assert store.initialize() is False


def test_write_then_read_returns_full_document(tmp_path):
    path = tmp_path / "data.json"
    store = JsonDocumentStore(path)
    document = empty_document()
    document["books"].append({"id": 1, "title": "Ficções", "author": "Jorge Luis Borges"})
    store.write(document)

    assert store.read() == document
    # indent=2 and non-ASCII kept as-is
    text = path.read_text(encoding="utf-8")
    assert "Ficções" in text
    assert '\n  "books"' in text


def test_write_leaves_no_temporary_files(tmp_path):
    store = JsonDocumentStore(tmp_path / "data.json")
    store.write(empty_document())
    store.write(empty_document())
    assert sorted(p.name for p in tmp_path.iterdir()) == ["data.json"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(DataReadError) as excinfo:
        JsonDocumentStore(tmp_path / "missing.json").read()
    assert excinfo.value.message == "Data could not be read"
    assert excinfo.value.status_code == 500


def test_read_invalid_json_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataReadError):
        JsonDocumentStore(path).read()


@pytest.mark.parametrize(
    "document",
    [
        {"books": [], "authors": []},
        {"books": [], "authors": [], "users": {}},
        [],
    ],
)
def test_read_document_without_three_lists_raises(tmp_path, document):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    with pytest.raises(DataReadError):
        JsonDocumentStore(path).read()


def test_write_to_unwritable_location_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    # parent "directory" is a regular file
    store = JsonDocumentStore(blocker / "data.json")
    with pytest.raises(DataWriteError) as excinfo:
        store.write(empty_document())
    assert excinfo.value.message == "Data could not be saved"


def test_lock_is_noop_unless_enabled(tmp_path):
    plain = JsonDocumentStore(tmp_path / "a.json")
    locked = JsonDocumentStore(tmp_path / "b.json", locking=True)
    assert plain.locking is False
    assert locked.locking is True
    with plain.lock(), locked.lock(), locked.lock():
        pass


@pytest.mark.skipif(os.name == "nt", reason="POSIX file modes")
def test_write_keeps_existing_file_mode(tmp_path):
    path = tmp_path / "data.json"
    store = JsonDocumentStore(path)
    store.write(empty_document())
    os.chmod(path, 0o640)
    store.write(empty_document())
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o640


@pytest.mark.skipif(os.name == "nt", reason="POSIX file modes")
def test_new_data_file_is_not_private(tmp_path):
    path = tmp_path / "data.json"
    JsonDocumentStore(path).write(empty_document())
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o644
