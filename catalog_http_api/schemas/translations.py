"""
catalog_http_api/schemas/translations.py

Pydantic models for the "translations" HTTP API.

A translation is a single text string for one locale, addressed by a
dotted key (``app.title``) and labelled with any number of tags. Tags are
referenced by name and must already exist.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import Field, StringConstraints, model_validator

from .common import APIModel, Pagination


# ---------------------------------------------------------------------------
# Core types
# ---------------------------------------------------------------------------


LocaleCode = Annotated[str, StringConstraints(min_length=1, max_length=10)]
TranslationKey = Annotated[str, StringConstraints(min_length=1, max_length=255)]
TagName = Annotated[str, StringConstraints(min_length=1, max_length=64)]


class TranslationCreate(APIModel):
    """
    Payload for creating a new translation.
    """

    locale: LocaleCode = Field(..., description="Short language code", examples=["en"])
    key: TranslationKey = Field(
        ..., description="Dotted, namespaced key", examples=["app.title"]
    )
    content: str = Field(..., description="Translated text", examples=["My App"])
    tags: Optional[List[TagName]] = Field(
        default=None,
        description="Names of existing tags to attach (e.g. ['mobile', 'web']).",
    )


class TranslationUpdate(APIModel):
    """
    Partial update payload.

    Only provided fields are patched. ``tags`` omitted (or null) leaves the
    associations untouched; ``[]`` clears them.
    """

    locale: Optional[LocaleCode] = Field(default=None, description="New locale.")
    key: Optional[TranslationKey] = Field(default=None, description="New key.")
    content: Optional[str] = Field(default=None, description="New text.")
    tags: Optional[List[TagName]] = Field(
        default=None,
        description="Replace the tag set; send [] to clear.",
    )

    @model_validator(mode="before")
    @classmethod
    def _reject_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = [f for f in ("locale", "key", "content") if f in data and data[f] is None]
            if nulls:
                raise ValueError(f"Fields may be omitted but not null: {', '.join(nulls)}")
        return data


class TranslationRead(APIModel):
    """
    Translation record as returned by list endpoints.
    """

    id: int = Field(..., description="Database identifier")
    locale: str
    key: str
    content: str
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")


class TranslationDetail(TranslationRead):
    """
    Single translation with its resolved tag names.
    """

    tags: List[str] = Field(default_factory=list)

    @classmethod
    def from_row(cls, row: Any) -> "TranslationDetail":
        return cls(
            id=row.id,
            locale=row.locale,
            key=row.key,
            content=row.content,
            created_at=row.created_at,
            updated_at=row.updated_at,
            tags=row.tag_names,
        )


# ---------------------------------------------------------------------------
# List / collection wrappers
# ---------------------------------------------------------------------------


class TranslationPage(Pagination):
    """
    Response model for the paginated translation listing.
    """

    items: List[TranslationRead] = Field(
        default_factory=list,
        description="Page of translations.",
    )


__all__ = [
    "TranslationCreate",
    "TranslationUpdate",
    "TranslationRead",
    "TranslationDetail",
    "TranslationPage",
]
