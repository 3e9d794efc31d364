# tests/conftest.py
from datetime import datetime, timezone
from typing import Callable, Iterator, Optional, Sequence

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_http_api.config import LogFormat, Settings
from catalog_http_api.db import models
from catalog_http_api.db.session import get_session
from catalog_http_api.main import app
from catalog_http_api.repositories.tags import TagsRepository
from catalog_http_api.security import get_settings
from catalog_http_api.seeding import DEFAULT_TAGS

API_PREFIX = "/api"


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """In-memory SQLite shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )


@pytest.fixture()
def session(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seeded_tags(session: Session) -> Sequence[models.Tag]:
    tags = TagsRepository(session).ensure(DEFAULT_TAGS)
    session.commit()
    return tags


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        auth_required=False,
        create_schema_on_startup=False,
        log_format=LogFormat.CONSOLE,
    )


@pytest.fixture()
def make_translation(session: Session) -> Callable[..., models.Translation]:
    """
    Insert a translation directly, bypassing the API.

    ``updated_at`` can be pinned so freshness assertions are exact.
    """

    def _make(
        locale: str,
        key: str,
        content: str,
        tags: Sequence[str] = (),
        updated_at: Optional[datetime] = None,
    ) -> models.Translation:
        translation = models.Translation(locale=locale, key=key, content=content)
        if updated_at is not None:
            translation.updated_at = updated_at
        if tags:
            translation.tags = list(TagsRepository(session).get_by_names(tags))
        session.add(translation)
        session.commit()
        return translation

    return _make


@pytest.fixture()
def client(
    session_factory: sessionmaker,
    settings: Settings,
    seeded_tags: Sequence[models.Tag],
) -> Iterator[TestClient]:
    """
    TestClient whose requests use the in-memory store and test settings.
    """

    def _get_session() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)
