# catalog_http_api/services/translations_service.py

from __future__ import annotations

from typing import Iterable, List, Optional

from catalog_http_api.config import Settings
from catalog_http_api.logging import get_logger
from catalog_http_api.repositories.tags import TagsRepository
from catalog_http_api.repositories.translations import TranslationsRepository
from catalog_http_api.schemas.translations import (
    TranslationCreate,
    TranslationDetail,
    TranslationPage,
    TranslationRead,
    TranslationUpdate,
)
from catalog_http_api.services.filters import ListFilters, compose_list_criteria
from catalog_http_api.services.tag_reconciler import TagReconciler

log = get_logger(__name__)


class TranslationNotFoundError(Exception):
    """Raised when a translation cannot be found in the repository."""

    def __init__(self, translation_id: int) -> None:
        super().__init__(f"Translation with id={translation_id} not found.")
        self.translation_id = translation_id


class UnknownTagsError(Exception):
    """Raised when a create/update payload references tags that do not exist."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = list(names)
        super().__init__(f"Unknown tag(s): {', '.join(self.names)}")


class TranslationsService:
    """
    High-level service for working with catalog translations.

    Responsibilities:
    - Reject unknown tag names before anything is written.
    - Delegate persistence to `TranslationsRepository` and tag association
      replacement to `TagReconciler`.
    - Own the transaction: each write commits exactly once.
    - Convert ORM rows to API schemas.
    """

    def __init__(
        self,
        repo: TranslationsRepository,
        tags_repo: TagsRepository,
        settings: Settings,
        reconciler: Optional[TagReconciler] = None,
    ) -> None:
        self._repo = repo
        self._tags = tags_repo
        self._settings = settings
        self._reconciler = reconciler or TagReconciler(tags_repo)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_translations(self, filters: ListFilters, *, page: int = 1) -> TranslationPage:
        """
        Return one fixed-size page of translations matching ``filters``.
        """
        page_size = self._settings.page_size
        criteria = compose_list_criteria(filters)

        total = self._repo.count(criteria)
        rows = self._repo.list_page(
            criteria,
            limit=page_size,
            offset=(page - 1) * page_size,
        )

        return TranslationPage.build(
            total=total,
            page=page,
            page_size=page_size,
            items=[TranslationRead.model_validate(row) for row in rows],
        )

    def get_translation(self, translation_id: int) -> TranslationDetail:
        translation = self._repo.get_by_id(translation_id)
        if translation is None:
            raise TranslationNotFoundError(translation_id)
        return TranslationDetail.from_row(translation)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create_translation(self, payload: TranslationCreate) -> TranslationDetail:
        """
        Create a new translation and attach its tags.
        """
        self._ensure_tags_exist(payload.tags)

        translation = self._repo.create(
            locale=payload.locale,
            key=payload.key,
            content=payload.content,
        )
        self._reconciler.reconcile(translation, payload.tags)
        self._repo.session.commit()

        log.info(
            "translation_created",
            translation_id=translation.id,
            locale=translation.locale,
            key=translation.key,
        )
        return TranslationDetail.from_row(translation)

    def update_translation(
        self,
        translation_id: int,
        payload: TranslationUpdate,
    ) -> TranslationDetail:
        """
        Patch the provided fields of an existing translation.
        """
        translation = self._repo.get_by_id(translation_id)
        if translation is None:
            raise TranslationNotFoundError(translation_id)

        self._ensure_tags_exist(payload.tags)

        self._repo.update(
            translation,
            locale=payload.locale,
            key=payload.key,
            content=payload.content,
        )
        diff = self._reconciler.reconcile(translation, payload.tags)
        self._repo.session.commit()

        log.info(
            "translation_updated",
            translation_id=translation.id,
            fields=sorted(payload.model_fields_set),
            tags_changed=diff.changed,
        )
        return TranslationDetail.from_row(translation)

    def _ensure_tags_exist(self, names: Optional[List[str]]) -> None:
        if not names:
            return
        missing = self._tags.missing_names(names)
        if missing:
            raise UnknownTagsError(missing)


__all__ = [
    "TranslationNotFoundError",
    "UnknownTagsError",
    "TranslationsService",
]
