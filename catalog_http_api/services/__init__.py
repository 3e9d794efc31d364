"""
catalog_http_api.services
-------------------------

Service layer aggregation for the catalog HTTP API.

Routers and other callers should import service classes from this package
instead of depending directly on repositories.

Example:

    from catalog_http_api.services import ExportService, TranslationsService
"""

from .export_service import ExportService
from .tag_reconciler import TagReconciler
from .translations_service import TranslationsService

__all__ = [
    "ExportService",
    "TagReconciler",
    "TranslationsService",
]
