# tests/http_api/test_translations_api.py

from typing import Any, Dict

from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import API_PREFIX

TRANSLATIONS = f"{API_PREFIX}/translations"


def _payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "locale": "en",
        "key": "app.title",
        "content": "My App",
        "tags": ["mobile", "web"],
    }
    payload.update(overrides)
    return payload


class TestCreateTranslation:
    def test_create_returns_201_with_tags(self, client: TestClient) -> None:
        response = client.post(TRANSLATIONS, json=_payload())

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["locale"] == "en"
        assert data["key"] == "app.title"
        assert data["content"] == "My App"
        assert data["tags"] == ["mobile", "web"]
        assert isinstance(data["id"], int)

    def test_create_without_tags(self, client: TestClient) -> None:
        payload = _payload()
        del payload["tags"]

        response = client.post(TRANSLATIONS, json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["tags"] == []

    def test_unknown_tag_is_rejected_and_nothing_is_written(self, client: TestClient) -> None:
        response = client.post(TRANSLATIONS, json=_payload(tags=["mobile", "smartwatch"]))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        detail = response.json()["detail"]
        assert detail["code"] == "unknown_tags"
        assert detail["tags"] == ["smartwatch"]

        listing = client.get(TRANSLATIONS).json()
        assert listing["total"] == 0

    def test_missing_fields_are_validation_errors(self, client: TestClient) -> None:
        response = client.post(TRANSLATIONS, json={"locale": "en"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_locale_longer_than_ten_chars_is_rejected(self, client: TestClient) -> None:
        response = client.post(TRANSLATIONS, json=_payload(locale="x" * 11))
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_duplicate_locale_and_key_are_allowed(self, client: TestClient) -> None:
        first = client.post(TRANSLATIONS, json=_payload(content="One"))
        second = client.post(TRANSLATIONS, json=_payload(content="Two"))

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_201_CREATED
        assert first.json()["id"] != second.json()["id"]


class TestShowTranslation:
    def test_show_includes_tag_names(self, client: TestClient) -> None:
        created = client.post(TRANSLATIONS, json=_payload(tags=["web", "ios"])).json()

        response = client.get(f"{TRANSLATIONS}/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["tags"] == ["ios", "web"]

    def test_show_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.get(f"{TRANSLATIONS}/9999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Translation not found"


class TestUpdateTranslation:
    def test_update_content_keeps_tags_when_tags_omitted(self, client: TestClient) -> None:
        created = client.post(TRANSLATIONS, json=_payload()).json()

        response = client.patch(
            f"{TRANSLATIONS}/{created['id']}", json={"content": "Renamed"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["content"] == "Renamed"
        assert data["key"] == "app.title"
        assert data["tags"] == ["mobile", "web"]

    def test_update_tags_replaces_set(self, client: TestClient) -> None:
        created = client.post(TRANSLATIONS, json=_payload()).json()

        response = client.patch(
            f"{TRANSLATIONS}/{created['id']}", json={"tags": ["backend"]}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["tags"] == ["backend"]

    def test_update_same_tags_twice_is_idempotent(self, client: TestClient) -> None:
        created = client.post(TRANSLATIONS, json=_payload(tags=[])).json()
        url = f"{TRANSLATIONS}/{created['id']}"

        client.patch(url, json={"tags": ["mobile", "web"]})
        response = client.patch(url, json={"tags": ["mobile", "web"]})

        assert response.json()["tags"] == ["mobile", "web"]
        assert client.get(url).json()["tags"] == ["mobile", "web"]

    def test_update_with_empty_tags_clears(self, client: TestClient) -> None:
        created = client.post(TRANSLATIONS, json=_payload()).json()

        response = client.patch(f"{TRANSLATIONS}/{created['id']}", json={"tags": []})

        assert response.json()["tags"] == []

    def test_update_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.patch(f"{TRANSLATIONS}/9999", json={"content": "x"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_unknown_tag_is_422(self, client: TestClient) -> None:
        created = client.post(TRANSLATIONS, json=_payload()).json()

        response = client.patch(
            f"{TRANSLATIONS}/{created['id']}", json={"tags": ["smartwatch"]}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert client.get(f"{TRANSLATIONS}/{created['id']}").json()["tags"] == [
            "mobile",
            "web",
        ]

    def test_update_rejects_null_fields(self, client: TestClient) -> None:
        created = client.post(TRANSLATIONS, json=_payload()).json()

        response = client.patch(f"{TRANSLATIONS}/{created['id']}", json={"key": None})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestListTranslations:
    def test_pagination_uses_fixed_page_size(self, client: TestClient) -> None:
        for i in range(55):
            client.post(TRANSLATIONS, json=_payload(key=f"item.{i}", tags=None))

        first = client.get(TRANSLATIONS).json()
        second = client.get(TRANSLATIONS, params={"page": 2}).json()

        assert first["total"] == 55
        assert first["page_size"] == 50
        assert first["last_page"] == 2
        assert len(first["items"]) == 50
        assert len(second["items"]) == 5
        assert second["items"][0]["key"] == "item.50"

    def test_items_carry_record_fields(self, client: TestClient) -> None:
        client.post(TRANSLATIONS, json=_payload())

        item = client.get(TRANSLATIONS).json()["items"][0]

        assert {"id", "locale", "key", "content"} <= set(item)

    def test_filter_by_single_tag(self, client: TestClient) -> None:
        client.post(TRANSLATIONS, json=_payload(key="a", tags=["mobile"]))
        client.post(TRANSLATIONS, json=_payload(key="b", tags=["backend"]))

        data = client.get(TRANSLATIONS, params={"tag": "mobile"}).json()

        assert [item["key"] for item in data["items"]] == ["a"]

    def test_unknown_tag_filter_is_empty_not_error(self, client: TestClient) -> None:
        client.post(TRANSLATIONS, json=_payload())

        response = client.get(TRANSLATIONS, params={"tag": "smartwatch"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["total"] == 0

    def test_empty_tag_filter_matches_nothing(self, client: TestClient) -> None:
        client.post(TRANSLATIONS, json=_payload())

        response = client.get(TRANSLATIONS, params={"tag": ""})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["total"] == 0

    def test_filter_by_locale_key_and_content(self, client: TestClient) -> None:
        client.post(TRANSLATIONS, json=_payload(locale="en", key="app.title", content="My App"))
        client.post(TRANSLATIONS, json=_payload(locale="fr", key="app.title", content="Mon App"))
        client.post(TRANSLATIONS, json=_payload(locale="en", key="button.save", content="Save"))

        by_locale = client.get(TRANSLATIONS, params={"locale": "fr"}).json()
        by_key = client.get(TRANSLATIONS, params={"key": "button"}).json()
        by_content = client.get(TRANSLATIONS, params={"content": "Mon"}).json()

        assert [i["locale"] for i in by_locale["items"]] == ["fr"]
        assert [i["key"] for i in by_key["items"]] == ["button.save"]
        assert [i["content"] for i in by_content["items"]] == ["Mon App"]

    def test_page_must_be_positive(self, client: TestClient) -> None:
        response = client.get(TRANSLATIONS, params={"page": 0})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
