"""
Use cases for the Bookstore API.

Services orchestrate the document store and the collection repositories.
Routers (FastAPI endpoints) call these services instead of manipulating the
root document directly.
"""

from .entity_service import AUTHOR, BOOK, USER, EntityKind, EntityService

__all__ = ["AUTHOR", "BOOK", "USER", "EntityKind", "EntityService"]
