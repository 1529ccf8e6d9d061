"""
SQL persistence adapter.

Stores the same root document as one JSON row, so every write is a single
transaction. Handler logic is identical to the JSON file backend.
"""

from __future__ import annotations

import copy
import logging

from sqlalchemy.exc import SQLAlchemyError

from bookstore.core.errors import DataReadError, DataWriteError
from bookstore.db.create_tables import create_all
from bookstore.db.models import ROOT_DOCUMENT_ID, Document
from bookstore.db.session import get_session
from bookstore.repositories.document_store import DocumentStore, check_document

logger = logging.getLogger(__name__)


class SQLDocumentStore(DocumentStore):
    def __init__(self, url: str, *, locking: bool = False) -> None:
        super().__init__(locking=locking)
        self.url = url

    def __repr__(self) -> str:
        return f"SQLDocumentStore({self.url!r})"

    def exists(self) -> bool:
        try:
            with get_session(self.url) as session:
                return session.get(Document, ROOT_DOCUMENT_ID) is not None
        except SQLAlchemyError:
            return False

    def read(self) -> dict:
        try:
            with get_session(self.url) as session:
                row = session.get(Document, ROOT_DOCUMENT_ID)
                body = copy.deepcopy(row.body) if row is not None else None
        except SQLAlchemyError as exc:
            logger.error("Failed to read data from %s: %s", self.url, exc)
            raise DataReadError() from exc
        if body is None:
            logger.error("No root document stored in %s", self.url)
            raise DataReadError()
        return check_document(body)

    def write(self, document: dict) -> None:
        try:
            with get_session(self.url) as session:
                row = session.get(Document, ROOT_DOCUMENT_ID)
                if row is None:
                    session.add(Document(id=ROOT_DOCUMENT_ID, body=document))
                else:
                    # JSON columns only notice reassignment, not in-place edits
                    row.body = copy.deepcopy(document)
                session.commit()
        except SQLAlchemyError as exc:
            logger.error("Failed to write data to %s: %s", self.url, exc)
            raise DataWriteError() from exc

    def initialize(self) -> bool:
        try:
            create_all(self.url)
        except SQLAlchemyError as exc:
            logger.error("Failed to create tables in %s: %s", self.url, exc)
            raise DataWriteError() from exc
        return super().initialize()
