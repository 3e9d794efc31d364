# tests/http_api/test_store_errors.py

from fastapi import status
from sqlalchemy.exc import OperationalError

from catalog_http_api.db.session import get_session
from catalog_http_api.main import app
from tests.conftest import API_PREFIX


class _BrokenSession:
    """Session stand-in whose every query fails like an unreachable store."""

    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    def scalar(self, *args, **kwargs):
        return self.execute()

    def get(self, *args, **kwargs):
        return self.execute()

    def close(self) -> None:
        pass


def _broken_session():
    yield _BrokenSession()


def test_store_failure_maps_to_503_envelope(client) -> None:
    app.dependency_overrides[get_session] = _broken_session

    response = client.get(f"{API_PREFIX}/translations/export", params={"locale": "en"})

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["error"]["code"] == "store_unavailable"
    assert set(response.json()["error"]) == {"code", "message"}


def test_store_failure_on_listing(client) -> None:
    app.dependency_overrides[get_session] = _broken_session

    response = client.get(f"{API_PREFIX}/translations")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
