# catalog_http_api/db/models.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import (
    declarative_base,
    relationship,
    Mapped,
    mapped_column,
)

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Translation <-> Tag association
# ---------------------------------------------------------------------------

translation_tag = Table(
    "translation_tag",
    Base.metadata,
    Column(
        "translation_id",
        ForeignKey("translations.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


# ---------------------------------------------------------------------------
# Translations
# ---------------------------------------------------------------------------


class Translation(Base):
    """
    A single locale-keyed text string.

    `key` is a dotted, namespaced identifier such as ``app.title``.
    `(locale, key)` is not unique: duplicate rows are allowed and the
    export keeps the one with the highest id.
    """

    __tablename__ = "translations"
    __table_args__ = (
        Index("ix_translations_locale_key", "locale", "key"),
        # Serves the max(updated_at) read behind Last-Modified.
        Index("ix_translations_locale_updated_at", "locale", "updated_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    locale: Mapped[str] = mapped_column(String(10), nullable=False)
    key: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    # Relationships
    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary=translation_tag,
        back_populates="translations",
        order_by="Tag.name",
    )

    @property
    def tag_names(self) -> List[str]:
        return sorted(tag.name for tag in self.tags)

    def __repr__(self) -> str:
        return (
            f"<Translation id={self.id!r} locale={self.locale!r} key={self.key!r}>"
        )


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class Tag(Base):
    """
    Free-form label (platform, feature area, ...) attached to translations.

    Tags are seeded out of band; the API only references them by name.
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    translations: Mapped[List[Translation]] = relationship(
        "Translation",
        secondary=translation_tag,
        back_populates="tags",
    )

    def __repr__(self) -> str:
        return f"<Tag id={self.id!r} name={self.name!r}>"


# ---------------------------------------------------------------------------
# API tokens
# ---------------------------------------------------------------------------


class ApiToken(Base):
    """
    Bearer token issued from the admin CLI.

    Only the sha256 digest of the token is stored; the plaintext is shown
    once at creation time.
    """

    __tablename__ = "api_tokens"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    token_hash: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    last_used_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<ApiToken id={self.id!r} name={self.name!r}>"
