"""
In-memory collection operations over a root document snapshot.

Nothing here performs I/O: callers read the document first and write it back
afterwards. Not-found is signalled with ``None``.
"""

from __future__ import annotations

from typing import Any, Optional


def next_id(records: list[dict]) -> int:
    """``max(id) + 1`` so a delete never lets a new record reuse a live id."""
    ids = [r.get("id") for r in records if isinstance(r.get("id"), int) and not isinstance(r.get("id"), bool)]
    return max(ids, default=0) + 1


class CollectionRepository:
    """CRUD helpers for one of the document's top-level lists."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"CollectionRepository({self.name!r})"

    def records(self, document: dict) -> list[dict]:
        return document[self.name]

    def insert(self, document: dict, fields: dict[str, Any]) -> dict:
        records = self.records(document)
        record = {"id": next_id(records), **fields}
        records.append(record)
        return record

    def find_all(self, document: dict) -> list[dict]:
        return self.records(document)

    def _index_of(self, document: dict, record_id: int) -> Optional[int]:
        for index, record in enumerate(self.records(document)):
            if record.get("id") == record_id:
                return index
        return None

    def find_by_id(self, document: dict, record_id: int) -> Optional[dict]:
        index = self._index_of(document, record_id)
        if index is None:
            return None
        return self.records(document)[index]

    def update(self, document: dict, record_id: int, fields: dict[str, Any]) -> Optional[dict]:
        """
        Reassign every field in ``fields`` on the matching record.

        A ``None`` value erases the key, so a PUT that omits an optional
        field drops it from the stored record.
        """
        record = self.find_by_id(document, record_id)
        if record is None:
            return None
        for key, value in fields.items():
            if value is None:
                record.pop(key, None)
            else:
                record[key] = value
        return record

    def delete(self, document: dict, record_id: int) -> Optional[list[dict]]:
        index = self._index_of(document, record_id)
        if index is None:
            return None
        removed = self.records(document).pop(index)
        return [removed]


BOOKS = CollectionRepository("books")
AUTHORS = CollectionRepository("authors")
USERS = CollectionRepository("users")
