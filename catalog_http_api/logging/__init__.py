# catalog_http_api/logging/__init__.py

"""
Logging helpers for the Translation Catalog HTTP API.

API code should simply do:

    from catalog_http_api.logging import get_logger

    log = get_logger(__name__)
    log.info("translation_created", translation_id=42)

and remain decoupled from how structlog is wired (see ``config.py``).
"""

from __future__ import annotations

from typing import Optional

import structlog

DEFAULT_LOGGER_NAME = "catalog_http_api"


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for the catalog service.

    If ``name`` is omitted, a service-level default name is used
    (``catalog_http_api``).
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
