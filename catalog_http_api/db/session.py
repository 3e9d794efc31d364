# catalog_http_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from catalog_http_api.config import get_config

from .models import Base

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    """
    Create an engine for the catalog store.

    SQLite needs a special flag when used in a multi-threaded web app.
    """
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}

    return create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
    )


config = get_config()

engine = build_engine(config.database_url, echo=config.debug)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    class_=Session,
)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all catalog tables that do not exist yet.
    """
    Base.metadata.create_all(bind=bind or engine)


# ---------------------------------------------------------------------------
# FastAPI dependency / helper
# ---------------------------------------------------------------------------


def get_session() -> Generator[Session, None, None]:
    """
    FastAPI-style dependency that yields a database session and ensures it
    is closed afterwards. Uncommitted work is rolled back on close.

    Usage:

        from fastapi import Depends
        from catalog_http_api.db.session import get_session

        @router.get("/translations")
        def list_translations(session: Session = Depends(get_session)):
            ...
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def db_session() -> Generator[Session, None, None]:
    """
    Context manager for non-FastAPI usage, e.g. the admin CLI.

        from catalog_http_api.db.session import db_session

        with db_session() as session:
            ...
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


__all__ = [
    "build_engine",
    "engine",
    "SessionLocal",
    "init_db",
    "get_session",
    "db_session",
]
