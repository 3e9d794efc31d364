# catalog_http_api/repositories/__init__.py
"""
Repository layer public exports.

This package groups the concrete repositories used by the HTTP API.
Downstream code can import from this module instead of individual files, e.g.:

    from catalog_http_api.repositories import TranslationsRepository
"""

from .tags import TagsRepository
from .tokens import TokensRepository
from .translations import TranslationsRepository

__all__ = [
    "TagsRepository",
    "TokensRepository",
    "TranslationsRepository",
]
