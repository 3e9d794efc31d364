# catalog_http_api/routers/translations.py

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from catalog_http_api.config import Settings
from catalog_http_api.db.session import get_session
from catalog_http_api.repositories import TagsRepository, TranslationsRepository
from catalog_http_api.schemas.translations import (
    TranslationCreate,
    TranslationDetail,
    TranslationPage,
    TranslationUpdate,
)
from catalog_http_api.security import get_settings, require_token
from catalog_http_api.services.filters import ListFilters
from catalog_http_api.services.translations_service import (
    TranslationNotFoundError,
    TranslationsService,
    UnknownTagsError,
)

router = APIRouter(
    prefix="/translations",
    tags=["translations"],
    dependencies=[Depends(require_token)],
)


def get_translations_service(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> TranslationsService:
    """
    Dependency-injected factory for TranslationsService.

    Keeping this in one place makes it easy to swap the implementation in
    tests (``app.dependency_overrides``).
    """
    return TranslationsService(
        repo=TranslationsRepository(session),
        tags_repo=TagsRepository(session),
        settings=settings,
    )


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Translation not found",
    )


def _unknown_tags(exc: UnknownTagsError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={
            "code": "unknown_tags",
            "message": str(exc),
            "tags": exc.names,
        },
    )


@router.get(
    "",
    response_model=TranslationPage,
    summary="List translations",
    description=(
        "Return one page of translations (fixed page size), optionally filtered "
        "by locale, a single tag name, and substrings of key/content."
    ),
)
def list_translations(
    *,
    service: TranslationsService = Depends(get_translations_service),
    locale: Optional[str] = Query(None, description="Exact locale, e.g. 'en'."),
    tag: Optional[str] = Query(None, description="Exact tag name, e.g. 'mobile'."),
    key: Optional[str] = Query(None, description="Substring of the key."),
    content: Optional[str] = Query(None, description="Substring of the content."),
    page: int = Query(1, ge=1, description="1-based page index."),
) -> TranslationPage:
    filters = ListFilters.from_query(locale=locale, tag=tag, key=key, content=content)
    return service.list_translations(filters, page=page)


@router.post(
    "",
    response_model=TranslationDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create a translation",
    description="Create a translation and attach existing tags by name.",
)
def create_translation(
    *,
    service: TranslationsService = Depends(get_translations_service),
    payload: TranslationCreate,
) -> TranslationDetail:
    try:
        return service.create_translation(payload)
    except UnknownTagsError as exc:
        raise _unknown_tags(exc) from exc


@router.get(
    "/{translation_id}",
    response_model=TranslationDetail,
    summary="Get a single translation",
    description="Fetch a translation by numeric id, with its tag names.",
)
def get_translation(
    *,
    translation_id: int,
    service: TranslationsService = Depends(get_translations_service),
) -> TranslationDetail:
    try:
        return service.get_translation(translation_id)
    except TranslationNotFoundError as exc:
        raise _not_found() from exc


@router.patch(
    "/{translation_id}",
    response_model=TranslationDetail,
    summary="Update a translation",
    description=(
        "Patch locale/key/content. Supplying `tags` replaces the tag set; "
        "omitting it leaves the tags untouched."
    ),
)
def update_translation(
    *,
    translation_id: int,
    payload: TranslationUpdate,
    service: TranslationsService = Depends(get_translations_service),
) -> TranslationDetail:
    try:
        return service.update_translation(translation_id, payload)
    except TranslationNotFoundError as exc:
        raise _not_found() from exc
    except UnknownTagsError as exc:
        raise _unknown_tags(exc) from exc
