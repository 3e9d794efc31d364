# catalog_http_api/config.py

"""
Configuration for the Translation Catalog HTTP API.

This module centralizes tunable parameters for the FastAPI HTTP layer,
with sensible defaults that can be overridden via environment variables
(or a local ``.env`` file).

Environment variables
=====================

Every field of :class:`Settings` maps to an upper-cased variable with the
``CATALOG_`` prefix, e.g.:

- CATALOG_DATABASE_URL
    SQLAlchemy URL of the catalog store.
    Default: "sqlite:///./translation_catalog.db"

- CATALOG_API_PREFIX
    Prefix under which all routers are mounted.
    Default: "/api"

- CATALOG_CORS_ORIGINS
    Comma-separated list of allowed CORS origins, or "*".
    Default: "*"

- CATALOG_PAGE_SIZE
    Fixed page size of the translation listing.
    Default: 50

- CATALOG_EXPORT_BROWSER_MAX_AGE / CATALOG_EXPORT_SHARED_MAX_AGE
    Cache-Control policy of the export endpoint, in seconds.
    Default: 60 / 300

- CATALOG_AUTH_REQUIRED
    If true, translation routes require a bearer token issued with
    ``catalog-admin create-token``.
    Default: false

- CATALOG_LOG_LEVEL / CATALOG_LOG_FORMAT
    Logging level name and renderer ("json" or "console").
    Default: "INFO" / "json"

Typical usage
=============

    from catalog_http_api.config import get_config

    cfg = get_config()
    app = FastAPI(title=cfg.title, debug=cfg.debug, root_path=cfg.root_path)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Configuration values for the HTTP API layer.
    """

    # --- Application Meta ---
    title: str = "Translation Catalog HTTP API"
    version: str = "0.1.0"
    debug: bool = False

    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 8000
    root_path: str = ""
    api_prefix: str = "/api"
    cors_origins: str = "*"

    # --- Persistence ---
    database_url: str = "sqlite:///./translation_catalog.db"
    create_schema_on_startup: bool = True

    # --- Listing / export policy ---
    page_size: int = 50
    export_browser_max_age: int = 60
    export_shared_max_age: int = 300

    # --- Security ---
    auth_required: bool = False

    # --- Logging ---
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("root_path", "api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        # Allow "", or ensure it starts with "/" and has no trailing "/"
        value = value.strip()
        if not value or value == "/":
            return ""
        if not value.startswith("/"):
            value = "/" + value
        return value.rstrip("/")

    @field_validator("page_size")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be >= 1")
        return value

    @field_validator("export_browser_max_age", "export_shared_max_age")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be >= 0")
        return value

    @property
    def cors_origin_list(self) -> List[str]:
        raw = self.cors_origins.strip()
        if not raw or raw == "*":
            return ["*"]
        return [part.strip() for part in raw.split(",") if part.strip()]

    @property
    def cache_control(self) -> str:
        """Cache-Control directive attached to export responses."""
        return (
            f"public, max-age={self.export_browser_max_age}, "
            f"s-maxage={self.export_shared_max_age}"
        )


# Singleton configuration instance
_CONFIG: Optional[Settings] = None


def get_config() -> Settings:
    """
    Return the global Settings instance, creating it from environment
    variables on first use.
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = Settings()
    return _CONFIG


def set_config(config: Optional[Settings]) -> None:
    """
    Replace the global Settings instance.

    Mainly useful for tests, where you may want to override configuration
    without touching environment variables. Passing ``None`` resets it so
    the next ``get_config()`` call re-reads the environment.
    """
    global _CONFIG
    _CONFIG = config


__all__ = ["LogFormat", "Settings", "get_config", "set_config"]
