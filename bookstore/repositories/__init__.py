"""
Persistence adapters.

These modules encapsulate how the root document is stored and retrieved
(a JSON file by default, a SQL row optionally). Services depend on the
``DocumentStore`` interface rather than touching the file or the database.
"""

from .collections import AUTHORS, BOOKS, USERS, CollectionRepository
from .document_store import COLLECTIONS, DocumentStore, empty_document
from .factory import build_store

__all__ = [
    "AUTHORS",
    "BOOKS",
    "COLLECTIONS",
    "USERS",
    "CollectionRepository",
    "DocumentStore",
    "build_store",
    "empty_document",
]
