"""
Whole-document persistence interface.

A store holds one root document with exactly three lists (``books``,
``authors``, ``users``). Every ``read`` parses the full document and every
``write`` replaces it; there is no caching and no per-record I/O.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import nullcontext
from typing import Any, ContextManager

from bookstore.core.errors import DataReadError

COLLECTIONS = ("books", "authors", "users")


def empty_document() -> dict[str, list]:
    return {name: [] for name in COLLECTIONS}


def check_document(document: Any) -> dict:
    """Raise ``DataReadError`` unless ``document`` has the three lists."""
    if not isinstance(document, dict):
        raise DataReadError()
    for name in COLLECTIONS:
        if not isinstance(document.get(name), list):
            raise DataReadError()
    return document


class DocumentStore(ABC):
    """Reads and replaces the root document as a whole."""

    def __init__(self, *, locking: bool = False) -> None:
        self._lock = threading.RLock() if locking else None

    @property
    def locking(self) -> bool:
        return self._lock is not None

    def lock(self) -> ContextManager:
        """
        Guard a read-modify-write sequence.

        Without locking this is a no-op and two overlapping mutations can
        lose an update (last write wins).
        """
        if self._lock is None:
            return nullcontext()
        return self._lock

    @abstractmethod
    def exists(self) -> bool:
        """True when a document has been stored."""

    @abstractmethod
    def read(self) -> dict:
        """Return the parsed root document or raise ``DataReadError``."""

    @abstractmethod
    def write(self, document: dict) -> None:
        """Replace the stored document or raise ``DataWriteError``."""

    def initialize(self) -> bool:
        """Store an empty document when none exists; return True if created."""
        if self.exists():
            return False
        self.write(empty_document())
        return True
