"""Lookup of the per-kind services configured on ``app.state``."""
from __future__ import annotations

from fastapi import Request

from bookstore.services.entity_service import EntityService


def get_service(request: Request, kind: str) -> EntityService:
    services = getattr(getattr(request.app, "state", None), "services", None)
    if not services or kind not in services:
        raise RuntimeError(f"Service for {kind!r} is not configured")
    return services[kind]


def book_service(request: Request) -> EntityService:
    return get_service(request, "books")


def author_service(request: Request) -> EntityService:
    return get_service(request, "authors")


def user_service(request: Request) -> EntityService:
    return get_service(request, "users")
