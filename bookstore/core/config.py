"""
Configuration helpers for the Bookstore backend.

Settings are read from environment variables once and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    public_base_url: str
    host: str
    port: int
    data_backend: str
    data_file: str
    database_url: str
    store_locking: bool
    openapi_output: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:4000").rstrip("/"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "4000"), 4000),
        data_backend=(os.getenv("DATA_BACKEND") or "json").strip().lower(),
        data_file=os.getenv("DATA_FILE", "data.json"),
        database_url=os.getenv("DATABASE_URL", ""),
        store_locking=_bool(os.getenv("STORE_LOCKING"), False),
        openapi_output=os.getenv("OPENAPI_OUTPUT", "swagger-definition.json"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
