# tests/services/test_export_service.py

import pytest

from catalog_http_api.repositories.translations import TranslationsRepository
from catalog_http_api.services.export_service import ExportService
from catalog_http_api.services.filters import ExportFilters
from tests.conftest import utc

URL = "http://testserver/api/translations/export?locale=en"


@pytest.fixture()
def service(session, settings) -> ExportService:
    return ExportService(TranslationsRepository(session), settings)


def test_project_empty_view_is_empty_mapping(service, seeded_tags) -> None:
    assert service.project(ExportFilters("fr")) == {}


def test_project_duplicate_keys_last_id_wins(service, seeded_tags, make_translation) -> None:
    make_translation("en", "app.title", "First")
    make_translation("en", "button.save", "Save")
    make_translation("en", "app.title", "Second")

    assert service.project(ExportFilters("en")) == {
        "app.title": "Second",
        "button.save": "Save",
    }


def test_freshness_tracks_latest_row_of_the_view(service, seeded_tags, make_translation) -> None:
    make_translation("en", "a", "A", tags=["web"], updated_at=utc(2026, 1, 1, 10, 0, 0))
    make_translation("en", "b", "B", tags=["backend"], updated_at=utc(2026, 1, 2, 10, 0, 0))

    web_only = service.freshness_for(ExportFilters("en", ("web",)), URL)
    everything = service.freshness_for(ExportFilters("en"), URL)

    assert web_only.last_modified == utc(2026, 1, 1, 10, 0, 0)
    assert everything.last_modified == utc(2026, 1, 2, 10, 0, 0)


def test_freshness_of_empty_view_is_now(service, seeded_tags) -> None:
    now = utc(2026, 10, 19, 9, 30, 0)

    freshness = service.freshness_for(ExportFilters("fr"), URL, now=now)

    assert freshness.last_modified == now


def test_cache_control_comes_from_settings(session, settings) -> None:
    tuned = settings.model_copy(
        update={"export_browser_max_age": 10, "export_shared_max_age": 600}
    )
    service = ExportService(TranslationsRepository(session), tuned)

    assert service.cache_control == "public, max-age=10, s-maxage=600"
