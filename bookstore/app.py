from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from bookstore import __version__
from bookstore.core.config import Settings, get_settings
from bookstore.core.errors import register_error_handlers
from bookstore.core.log_config import configure_logging
from bookstore.repositories.document_store import DocumentStore
from bookstore.repositories.factory import build_store
from bookstore.routers import authors as authors_router
from bookstore.routers import books as books_router
from bookstore.routers import pages as pages_router
from bookstore.routers import users as users_router
from bookstore.services.entity_service import AUTHOR, BOOK, USER, EntityService

logger = logging.getLogger(__name__)

DOCS_URL = "/api-docs"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        # Swagger UI assets are served from jsdelivr
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "img-src 'self' data: https://fastapi.tiangolo.com; "
            "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
            "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
            "object-src 'none'; frame-ancestors 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("X-DNS-Prefetch-Control", "off")
        response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def write_openapi_document(app: FastAPI, output: str) -> Path | None:
    """Dump the OpenAPI document to ``output``; an empty path disables it."""
    if not output:
        return None
    path = Path(output)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(app.openapi(), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write OpenAPI document to %s: %s", path, exc)
        return None
    logger.info("OpenAPI document written to %s", path)
    return path


def create_app(settings: Settings | None = None, store: DocumentStore | None = None) -> FastAPI:
    """Build the API around ``store`` (defaults to the configured backend)."""
    settings = settings or get_settings()
    store = store or build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        if store.initialize():
            logger.info("Created empty root document in %r", store)
        write_openapi_document(app, settings.openapi_output)
        yield

    app = FastAPI(
        title="Bookstore API",
        version=__version__,
        description="API for managing a bookstore with books, authors, and users",
        docs_url=DOCS_URL,
        redoc_url=None,
        servers=[{"url": settings.public_base_url, "description": "Development server"}],
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.services = {
        "books": EntityService(store, BOOK),
        "authors": EntityService(store, AUTHOR),
        "users": EntityService(store, USER),
    }

    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    register_error_handlers(app)

    app.include_router(pages_router.router)
    app.include_router(books_router.router)
    app.include_router(authors_router.router)
    app.include_router(users_router.router)
    return app
