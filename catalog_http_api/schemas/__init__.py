"""
Top-level export module for HTTP API schemas.
"""
from . import common
from . import translations

# Common primitives
from .common import (
    APIModel,
    ErrorDetail,
    ErrorResponse,
    Pagination,
)

# Translations
from .translations import (
    TranslationCreate,
    TranslationDetail,
    TranslationPage,
    TranslationRead,
    TranslationUpdate,
)

__all__ = [
    # Submodules
    "common", "translations",

    # Common
    "APIModel", "ErrorDetail", "ErrorResponse", "Pagination",

    # Translations
    "TranslationCreate", "TranslationDetail", "TranslationPage",
    "TranslationRead", "TranslationUpdate",
]
