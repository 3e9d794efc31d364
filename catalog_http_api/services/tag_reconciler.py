# catalog_http_api/services/tag_reconciler.py

"""
Replace a translation's tag associations with an exact set of names.

``reconcile(translation, None)`` leaves the associations alone (the
``tags`` field was omitted); ``reconcile(translation, [])`` clears them.
Names are expected to be validated upstream, so a name that does not
resolve to a tag is an invariant violation, not a user error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Sequence

from catalog_http_api.db import models
from catalog_http_api.logging import get_logger
from catalog_http_api.repositories.tags import TagsRepository

log = get_logger(__name__)


class TagReconciliationError(RuntimeError):
    """Raised when a tag name reaches the reconciler without a matching tag."""

    def __init__(self, names: Sequence[str]) -> None:
        super().__init__(f"Cannot resolve tag(s): {', '.join(names)}")
        self.names = list(names)


@dataclass(frozen=True)
class TagDiff:
    added: FrozenSet[str] = frozenset()
    removed: FrozenSet[str] = frozenset()

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


class TagReconciler:
    def __init__(self, tags_repo: TagsRepository) -> None:
        self._tags = tags_repo

    def reconcile(
        self,
        translation: models.Translation,
        names: Optional[Sequence[str]],
    ) -> TagDiff:
        if names is None:
            return TagDiff()

        desired = {tag.name: tag for tag in self._tags.get_by_names(names)}
        unresolved = [name for name in dict.fromkeys(names) if name not in desired]
        if unresolved:
            raise TagReconciliationError(unresolved)

        current = {tag.name: tag for tag in translation.tags}
        to_add = desired.keys() - current.keys()
        to_remove = current.keys() - desired.keys()

        for name in to_remove:
            translation.tags.remove(current[name])
        for name in sorted(to_add):
            translation.tags.append(desired[name])

        diff = TagDiff(added=frozenset(to_add), removed=frozenset(to_remove))
        if diff.changed:
            # Membership changes must move the export validator too.
            translation.updated_at = models.utcnow()
            self._tags.session.flush()
            log.debug(
                "tags_reconciled",
                translation_id=translation.id,
                added=sorted(diff.added),
                removed=sorted(diff.removed),
            )
        return diff


__all__ = ["TagDiff", "TagReconciler", "TagReconciliationError"]
