# catalog_http_api/services/filters.py

"""
Filter composition for translation listing and export.

Request parameters are captured in explicit, defaulted structures
(``ListFilters`` / ``ExportFilters``) and turned into a list of SQL
criteria. The repository applies the same list to every read of a view
(count, page, max(updated_at), key/content projection).

Tag semantics differ between the two endpoints:

- listing takes exactly one tag name and keeps translations having an
  association with a tag of exactly that name;
- export takes a set of names and keeps translations having an
  association with *any* tag in the set (OR, not AND).

Unknown tag names are not an error here: they simply match nothing. The
same holds for a tag parameter that is present but empty (`tag=`,
`tags=`), since no tag has an empty name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from sqlalchemy import ColumnElement, false

from catalog_http_api.db import models


def _clean(value: Optional[str]) -> Optional[str]:
    # Empty query-string values count as absent.
    if value is None or value == "":
        return None
    return value


def split_tags(raw: Optional[str]) -> Tuple[str, ...]:
    """
    Split a comma-separated tag parameter.

    Whitespace around items is stripped, empty items and repeats dropped;
    first-occurrence order is kept.
    """
    if not raw:
        return ()
    parts = (part.strip() for part in raw.split(","))
    return tuple(dict.fromkeys(part for part in parts if part))


@dataclass(frozen=True)
class ListFilters:
    locale: Optional[str] = None
    tag: Optional[str] = None
    key: Optional[str] = None
    content: Optional[str] = None

    @classmethod
    def from_query(
        cls,
        *,
        locale: Optional[str] = None,
        tag: Optional[str] = None,
        key: Optional[str] = None,
        content: Optional[str] = None,
    ) -> "ListFilters":
        return cls(
            locale=_clean(locale),
            tag=tag,
            key=_clean(key),
            content=_clean(content),
        )


@dataclass(frozen=True)
class ExportFilters:
    locale: str
    # None: no tag filter. Empty tuple: filter present but naming no tag.
    tags: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_query(cls, locale: str, tags: Optional[str] = None) -> "ExportFilters":
        if tags is None:
            return cls(locale=locale)
        return cls(locale=locale, tags=split_tags(tags))


def compose_list_criteria(filters: ListFilters) -> List[ColumnElement[bool]]:
    """
    Criteria for the paginated listing.
    """
    Translation = models.Translation
    criteria: List[ColumnElement[bool]] = []

    if filters.tag is not None:
        criteria.append(Translation.tags.any(models.Tag.name == filters.tag))

    if filters.key is not None:
        criteria.append(Translation.key.contains(filters.key, autoescape=True))

    if filters.content is not None:
        criteria.append(Translation.content.contains(filters.content, autoescape=True))

    if filters.locale is not None:
        criteria.append(Translation.locale == filters.locale)

    return criteria


def compose_export_criteria(filters: ExportFilters) -> List[ColumnElement[bool]]:
    """
    Criteria for the export view: locale equality plus existential tag
    membership when tags were requested.
    """
    Translation = models.Translation
    criteria: List[ColumnElement[bool]] = [Translation.locale == filters.locale]

    if filters.tags is not None:
        if filters.tags:
            criteria.append(Translation.tags.any(models.Tag.name.in_(filters.tags)))
        else:
            criteria.append(false())

    return criteria


__all__ = [
    "ListFilters",
    "ExportFilters",
    "split_tags",
    "compose_list_criteria",
    "compose_export_criteria",
]
