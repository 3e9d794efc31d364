# catalog_http_api/repositories/translations.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import Session, selectinload

from ..db import models

Criteria = Sequence[ColumnElement[bool]]


class TranslationsRepository:
    """
    Thin data-access layer around the Translation model.

    Read methods take a list of SQL criteria (built by
    ``services.filters``) so that count, page, max(updated_at) and the
    key/content projection all see the same filtered view.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self, criteria: Criteria = ()) -> Select[Any]:
        return select(models.Translation).where(*criteria)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def count(self, criteria: Criteria = ()) -> int:
        stmt = select(func.count(models.Translation.id)).where(*criteria)
        return int(self.session.execute(stmt).scalar_one())

    def list_page(
        self,
        criteria: Criteria = (),
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> Sequence[models.Translation]:
        """
        Return one page of translations, oldest id first.
        """
        stmt = self._base_select(criteria).order_by(models.Translation.id)

        if offset:
            stmt = stmt.offset(offset)
        if limit:
            stmt = stmt.limit(limit)

        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def get_by_id(self, translation_id: int) -> Optional[models.Translation]:
        """
        Fetch a single translation with its tags, or None if it does not exist.
        """
        stmt = (
            self._base_select()
            .where(models.Translation.id == translation_id)
            .options(selectinload(models.Translation.tags))
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def max_updated_at(self, criteria: Criteria = ()) -> Optional[datetime]:
        """
        Latest ``updated_at`` across the filtered view, None when it is empty.
        """
        stmt = select(func.max(models.Translation.updated_at)).where(*criteria)
        return self.session.execute(stmt).scalar_one_or_none()

    def pluck_key_content(self, criteria: Criteria = ()) -> dict[str, str]:
        """
        Flatten the filtered view into ``{key: content}``.

        Rows are read in id order, so when a key is duplicated the row
        with the highest id wins.
        """
        stmt = (
            select(models.Translation.key, models.Translation.content)
            .where(*criteria)
            .order_by(models.Translation.id)
        )
        flattened: dict[str, str] = {}
        for key, content in self.session.execute(stmt):
            flattened[key] = content
        return flattened

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        locale: str,
        key: str,
        content: str,
    ) -> models.Translation:
        """
        Create and persist a new Translation.
        """
        translation = models.Translation(locale=locale, key=key, content=content)

        self.session.add(translation)
        self.session.flush()

        return translation

    def update(
        self,
        translation: models.Translation,
        *,
        locale: Optional[str] = None,
        key: Optional[str] = None,
        content: Optional[str] = None,
    ) -> models.Translation:
        """
        Apply partial updates to an existing Translation and flush.
        """
        if locale is not None:
            translation.locale = locale
        if key is not None:
            translation.key = key
        if content is not None:
            translation.content = content

        self.session.add(translation)
        self.session.flush()

        return translation
