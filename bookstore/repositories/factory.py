"""Build the configured ``DocumentStore``."""
from __future__ import annotations

from bookstore.core.config import Settings, get_settings
from bookstore.repositories.document_store import DocumentStore
from bookstore.repositories.json_storage import JsonDocumentStore
from bookstore.repositories.sql_storage import SQLDocumentStore


def build_store(settings: Settings | None = None) -> DocumentStore:
    settings = settings or get_settings()
    if settings.data_backend == "sql":
        return SQLDocumentStore(settings.database_url, locking=settings.store_locking)
    if settings.data_backend != "json":
        raise RuntimeError(f"Unknown DATA_BACKEND {settings.data_backend!r} (expected 'json' or 'sql')")
    return JsonDocumentStore(settings.data_file, locking=settings.store_locking)
