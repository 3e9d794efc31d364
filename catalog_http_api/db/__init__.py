"""
catalog_http_api.db
===================

Database package for the Translation Catalog HTTP API.

This module centralizes the public DB primitives so the rest of the
service can import them from a single place, e.g.:

    from catalog_http_api.db import Base, engine, SessionLocal, get_session
"""

from .models import ApiToken, Base, Tag, Translation, translation_tag
from .session import SessionLocal, db_session, engine, get_session, init_db

__all__ = [
    "ApiToken",
    "Base",
    "Tag",
    "Translation",
    "translation_tag",
    "engine",
    "SessionLocal",
    "db_session",
    "get_session",
    "init_db",
]
