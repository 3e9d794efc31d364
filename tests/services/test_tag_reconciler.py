# tests/services/test_tag_reconciler.py

import pytest

from catalog_http_api.repositories.tags import TagsRepository
from catalog_http_api.services.tag_reconciler import (
    TagReconciler,
    TagReconciliationError,
)
from tests.conftest import utc


@pytest.fixture()
def reconciler(session) -> TagReconciler:
    return TagReconciler(TagsRepository(session))


def test_reconcile_twice_is_idempotent(session, seeded_tags, make_translation, reconciler) -> None:
    translation = make_translation("en", "app.title", "My App")

    first = reconciler.reconcile(translation, ["mobile", "web"])
    session.commit()
    second = reconciler.reconcile(translation, ["web", "mobile"])
    session.commit()

    assert first.added == {"mobile", "web"}
    assert not second.changed
    assert translation.tag_names == ["mobile", "web"]


def test_reconcile_replaces_the_whole_set(session, seeded_tags, make_translation, reconciler) -> None:
    translation = make_translation("en", "k", "c", tags=["mobile", "ios"])

    diff = reconciler.reconcile(translation, ["ios", "web"])
    session.commit()

    assert diff.added == {"web"}
    assert diff.removed == {"mobile"}
    assert translation.tag_names == ["ios", "web"]


def test_absent_names_leave_tags_untouched(session, seeded_tags, make_translation, reconciler) -> None:
    translation = make_translation("en", "k", "c", tags=["backend"])

    diff = reconciler.reconcile(translation, None)

    assert not diff.changed
    assert translation.tag_names == ["backend"]


def test_empty_names_clear_tags(session, seeded_tags, make_translation, reconciler) -> None:
    translation = make_translation("en", "k", "c", tags=["backend", "web"])

    diff = reconciler.reconcile(translation, [])
    session.commit()

    assert diff.removed == {"backend", "web"}
    assert translation.tag_names == []


def test_changed_set_bumps_updated_at(session, seeded_tags, make_translation, reconciler) -> None:
    pinned = utc(2020, 1, 1, 0, 0, 0)
    translation = make_translation("en", "k", "c", updated_at=pinned)

    reconciler.reconcile(translation, ["web"])
    session.commit()

    assert translation.updated_at.replace(tzinfo=None) > pinned.replace(tzinfo=None)


def test_unresolvable_name_raises(
    session, seeded_tags, make_translation, reconciler
) -> None:
    translation = make_translation("en", "k", "c", tags=["web"])

    with pytest.raises(TagReconciliationError) as excinfo:
        reconciler.reconcile(translation, ["web", "smartwatch"])

    assert excinfo.value.names == ["smartwatch"]
    assert translation.tag_names == ["web"]
