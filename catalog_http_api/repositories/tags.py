# catalog_http_api/repositories/tags.py

from __future__ import annotations

from typing import Iterable, List, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import models


class TagsRepository:
    """
    Data-access layer around the Tag model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def list_names(self) -> List[str]:
        stmt = select(models.Tag.name).order_by(models.Tag.name)
        return list(self.session.execute(stmt).scalars().all())

    def get_by_names(self, names: Iterable[str]) -> Sequence[models.Tag]:
        """
        Fetch the tags whose name is in ``names`` in one query.
        """
        names_list = list(dict.fromkeys(names))
        if not names_list:
            return []

        stmt = select(models.Tag).where(models.Tag.name.in_(names_list))
        return list(self.session.execute(stmt).scalars().all())

    def missing_names(self, names: Iterable[str]) -> List[str]:
        """
        Return the names (input order, de-duplicated) that match no tag.
        """
        wanted = list(dict.fromkeys(names))
        found = {tag.name for tag in self.get_by_names(wanted)}
        return [name for name in wanted if name not in found]

    def ensure(self, names: Iterable[str]) -> List[models.Tag]:
        """
        Return tags for ``names``, creating the missing ones.

        Only used by seeding tools; the API never creates tags.
        """
        wanted = list(dict.fromkeys(names))
        existing = {tag.name: tag for tag in self.get_by_names(wanted)}

        for name in wanted:
            if name not in existing:
                tag = models.Tag(name=name)
                self.session.add(tag)
                existing[name] = tag

        self.session.flush()
        return [existing[name] for name in wanted]
