"""
FastAPI routers grouped by entity kind (books, authors, users) plus the
welcome page.

Each module exposes an ``APIRouter`` included by ``bookstore.app``.
"""
