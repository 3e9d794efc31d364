# catalog_http_api/routers/export.py

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from catalog_http_api.config import Settings
from catalog_http_api.db.session import get_session
from catalog_http_api.logging import get_logger
from catalog_http_api.repositories import TranslationsRepository
from catalog_http_api.security import get_settings, require_token
from catalog_http_api.services.export_service import ExportService
from catalog_http_api.services.filters import ExportFilters
from catalog_http_api.services.freshness import Freshness, is_not_modified

log = get_logger(__name__)

# Mounted before the translations router so "/translations/export" is not
# captured by "/translations/{translation_id}".
router = APIRouter(
    prefix="/translations",
    tags=["export"],
    dependencies=[Depends(require_token)],
)


def get_export_service(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> ExportService:
    return ExportService(repo=TranslationsRepository(session), settings=settings)


def _cache_headers(freshness: Freshness, cache_control: str) -> dict[str, str]:
    return {
        "ETag": freshness.etag_header,
        "Last-Modified": freshness.last_modified_header,
        "Cache-Control": cache_control,
    }


@router.get(
    "/export",
    summary="Export a locale as a flat key/content map",
    description=(
        "Returns `{key: content}` for one locale, optionally restricted to "
        "translations carrying any of the comma-separated `tags`. Supports "
        "`If-None-Match` and `If-Modified-Since`. The freshness check and the "
        "body are read separately, so under concurrent writes the body may be "
        "slightly newer than its validator."
    ),
    responses={304: {"description": "Not modified"}},
)
def export_translations(
    *,
    request: Request,
    service: ExportService = Depends(get_export_service),
    locale: str = Query(..., min_length=1, description="Locale to export, e.g. 'en'."),
    tags: Optional[str] = Query(
        None,
        description="Comma-separated tag names; a translation matches if it has any.",
    ),
    if_none_match: Optional[str] = Header(None),
    if_modified_since: Optional[str] = Header(None),
) -> Response:
    filters = ExportFilters.from_query(locale, tags)
    freshness = service.freshness_for(filters, str(request.url))
    headers = _cache_headers(freshness, service.cache_control)

    if is_not_modified(freshness, if_none_match, if_modified_since):
        log.info("export_not_modified", locale=filters.locale, tags=list(filters.tags or ()))
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers=headers)

    body = service.project(filters)
    log.info(
        "export_served",
        locale=filters.locale,
        tags=list(filters.tags or ()),
        keys=len(body),
    )
    return JSONResponse(content=body, headers=headers)
