"""
CRUD use cases shared by books, authors and users.

Each call is a strict pipeline: check required fields, read the root
document, run one repository operation, write the document back when
mutating. Mutations run inside ``store.lock()``, which is a no-op unless
store locking is enabled.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from bookstore.core.errors import DataWriteError, EntityNotFoundError, MissingFieldsError, PersistenceError
from bookstore.repositories.collections import AUTHORS, BOOKS, USERS, CollectionRepository
from bookstore.repositories.document_store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityKind:
    """Static description of one entity kind."""

    repository: CollectionRepository
    label: str
    fields: tuple[str, ...]
    required_on_update: tuple[str, ...]
    missing_fields_message: str
    defaults: Mapping[str, Any] = field(default_factory=dict)

    @property
    def noun(self) -> str:
        return self.label.lower()


BOOK = EntityKind(
    repository=BOOKS,
    label="Book",
    fields=("title", "author", "publicationDate", "ISBN"),
    required_on_update=("title", "author", "publicationDate", "ISBN"),
    missing_fields_message="All book fields (title, author, publicationDate, ISBN) are required",
)
AUTHOR = EntityKind(
    repository=AUTHORS,
    label="Author",
    fields=("name", "books", "biography"),
    required_on_update=("name",),
    missing_fields_message="Author name is required",
    defaults={"books": []},
)
USER = EntityKind(
    repository=USERS,
    label="User",
    fields=("name", "email", "purchasedBooks"),
    required_on_update=("name", "email"),
    missing_fields_message="Name and email are required",
    defaults={"purchasedBooks": []},
)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class EntityService:
    """Create/list/get/update/delete for a single entity kind."""

    def __init__(self, store: DocumentStore, kind: EntityKind) -> None:
        self.store = store
        self.kind = kind
        self.repository = kind.repository

    def _not_found(self) -> EntityNotFoundError:
        return EntityNotFoundError(f"{self.kind.label} not found")

    def _save(self, document: dict, verb: str) -> None:
        try:
            self.store.write(document)
        except DataWriteError as exc:
            raise PersistenceError(f"Failed to {verb} {self.kind.noun} data") from exc

    def _creation_fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for name in self.kind.fields:
            value = fields.get(name)
            if value is None and name in self.kind.defaults:
                value = copy.deepcopy(self.kind.defaults[name])
            if value is not None:
                result[name] = value
        return result

    def create(self, fields: dict[str, Any]) -> dict:
        """Append a new record; optional lists default to ``[]``."""
        record_fields = self._creation_fields(fields)
        with self.store.lock():
            document = self.store.read()
            record = self.repository.insert(document, record_fields)
            self._save(document, "save")
        logger.info("Created %s %s", self.kind.noun, record["id"])
        return record

    def list_all(self) -> list[dict]:
        return self.repository.find_all(self.store.read())

    def get(self, record_id: int) -> dict:
        record = self.repository.find_by_id(self.store.read(), record_id)
        if record is None:
            raise self._not_found()
        return record

    def update(self, record_id: int, fields: dict[str, Any]) -> dict:
        """
        Replace the record's fields.

        Every required field must be present and non-blank; optional fields
        left out of ``fields`` are erased from the stored record.
        """
        if any(_is_blank(fields.get(name)) for name in self.kind.required_on_update):
            raise MissingFieldsError(self.kind.missing_fields_message)
        replacement = {name: fields.get(name) for name in self.kind.fields}
        with self.store.lock():
            document = self.store.read()
            record = self.repository.update(document, record_id, replacement)
            if record is None:
                raise self._not_found()
            self._save(document, "update")
        logger.info("Updated %s %s", self.kind.noun, record_id)
        return record

    def delete(self, record_id: int) -> list[dict]:
        with self.store.lock():
            document = self.store.read()
            removed = self.repository.delete(document, record_id)
            if removed is None:
                raise self._not_found()
            self._save(document, "delete")
        logger.info("Deleted %s %s", self.kind.noun, record_id)
        return removed
