"""
JSON file persistence adapter.

The root document lives in a single file (``data.json`` by default) that is
rewritten in full on every mutation.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

from bookstore.core.errors import DataReadError, DataWriteError
from bookstore.repositories.document_store import DocumentStore, check_document

logger = logging.getLogger(__name__)

# mode for a data file created from scratch; existing files keep theirs
NEW_FILE_MODE = 0o644


class JsonDocumentStore(DocumentStore):
    def __init__(self, path: str | Path, *, locking: bool = False) -> None:
        super().__init__(locking=locking)
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonDocumentStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> dict:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Failed to read data from %s: %s", self.path, exc)
            raise DataReadError() from exc
        try:
            return check_document(document)
        except DataReadError:
            logger.error("Malformed root document in %s", self.path)
            raise

    def write(self, document: dict) -> None:
        payload = json.dumps(document, ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            directory = self.path.parent
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            else:
                os.chmod(tmp_name, NEW_FILE_MODE)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            logger.error("Failed to write data to %s: %s", self.path, exc)
            raise DataWriteError() from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
