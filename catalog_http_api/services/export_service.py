# catalog_http_api/services/export_service.py

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from catalog_http_api.config import Settings
from catalog_http_api.repositories.translations import TranslationsRepository
from catalog_http_api.services.filters import ExportFilters, compose_export_criteria
from catalog_http_api.services.freshness import Freshness, build_freshness


class ExportService:
    """
    Bulk export of a locale as a flat ``{key: content}`` mapping.

    The router asks for ``freshness_for`` first and only calls ``project``
    when the conditional headers did not already satisfy the request, so a
    304 costs a single aggregate query.
    """

    def __init__(self, repo: TranslationsRepository, settings: Settings) -> None:
        self._repo = repo
        self._settings = settings

    @property
    def cache_control(self) -> str:
        return self._settings.cache_control

    def freshness_for(
        self,
        filters: ExportFilters,
        request_url: str,
        now: Optional[datetime] = None,
    ) -> Freshness:
        criteria = compose_export_criteria(filters)
        return build_freshness(request_url, self._repo.max_updated_at(criteria), now=now)

    def project(self, filters: ExportFilters) -> Dict[str, str]:
        """
        Flatten the filtered view; duplicate keys resolve to the row with
        the highest id. An empty view yields ``{}``.
        """
        return self._repo.pluck_key_content(compose_export_criteria(filters))
