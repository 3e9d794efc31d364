"""
Entry point for the Translation Catalog HTTP API.

This module creates the FastAPI application, wires up middleware, and mounts
all routers under a common prefix.

Intended usage:
    uvicorn catalog_http_api.main:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog_http_api.config import Settings, get_config
from catalog_http_api.db.session import init_db
from catalog_http_api.logging import get_logger
from catalog_http_api.logging.config import configure_logging
from catalog_http_api.routers import export, tags, translations
from catalog_http_api.schemas.common import ErrorDetail, ErrorResponse

log = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def _bind_request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    Bind a request id and path into structlog contextvars for every log line
    emitted while handling the request.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def _store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """
    Store failures end the request; nothing is retried or served from cache.
    """
    log.exception("store_error", error=str(exc))
    envelope = ErrorResponse(
        error=ErrorDetail(
            code="store_unavailable",
            message="The translation store could not complete the request.",
        )
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=envelope.model_dump(exclude_none=True),
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    settings = settings or get_config()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "app_startup",
            version=settings.version,
            api_prefix=settings.api_prefix,
            auth_required=settings.auth_required,
        )
        if settings.create_schema_on_startup:
            init_db()
        yield
        log.info("app_shutdown")

    app = FastAPI(
        title=settings.title,
        version=settings.version,
        debug=settings.debug,
        root_path=settings.root_path,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["ETag", "Last-Modified", REQUEST_ID_HEADER],
    )
    app.middleware("http")(_bind_request_context)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)

    # Simple health check
    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {
            "status": "ok",
            "version": settings.version,
            "api_prefix": settings.api_prefix,
        }

    # Export first: "/translations/export" must win over "/translations/{id}".
    app.include_router(export.router, prefix=settings.api_prefix)
    app.include_router(translations.router, prefix=settings.api_prefix)
    app.include_router(tags.router, prefix=settings.api_prefix)

    return app


# Default application instance
app = create_app()


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    import uvicorn

    cfg = get_config()
    uvicorn.run(
        "catalog_http_api.main:app",
        host=cfg.host,
        port=cfg.port,
        reload=cfg.debug,
    )
