# catalog_http_api/seeding.py

"""
Synthetic catalog data for load testing.

``populate`` writes translations straight through Core ``insert()`` in
fixed-size batches, one commit per batch. Ids are assigned by the
database and read back with ``RETURNING``, so the backend must support it
(SQLite 3.35+, PostgreSQL, MariaDB). It is a disposable-data tool: a
failure mid-run leaves the batches already committed in place.
"""

from __future__ import annotations

import gc
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import insert
from sqlalchemy.orm import Session

from catalog_http_api.db import models
from catalog_http_api.logging import get_logger
from catalog_http_api.repositories.tags import TagsRepository

log = get_logger(__name__)

DEFAULT_TAGS: Tuple[str, ...] = (
    "mobile",
    "desktop",
    "web",
    "ios",
    "android",
    "backend",
    "frontend",
)

MOBILE_TAGS = ("mobile", "ios", "android")
WEB_TAGS = ("web", "desktop", "frontend")
BACKEND_TAGS = ("backend",)

KEY_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "app": ("welcome", "title", "description", "name", "version", "loading", "error", "success"),
    "button": (
        "save", "cancel", "submit", "delete", "edit", "create",
        "update", "close", "back", "next", "previous", "confirm",
    ),
    "message": (
        "success", "error", "warning", "info", "confirm",
        "deleted", "created", "updated", "saved",
    ),
    "form": ("label", "placeholder", "required", "invalid", "validation", "submit", "reset"),
    "error": (
        "required", "invalid", "not_found", "unauthorized",
        "server", "network", "timeout", "validation",
    ),
    "page": ("title", "description", "heading", "subheading", "footer", "header"),
    "field": ("email", "password", "name", "phone", "address", "city", "country", "zip"),
    "status": ("active", "inactive", "pending", "completed", "failed", "processing"),
}

CONTENT_TEMPLATES: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "en": {
        "app.welcome": ("Welcome", "Welcome to {app}", "Hello, welcome!"),
        "app.title": ("{app} - Dashboard", "{app} Application", "{app} Platform"),
        "button.save": ("Save", "Save Changes", "Save Now"),
        "button.cancel": ("Cancel", "Cancel Changes", "Go Back"),
        "message.success": ("Success!", "Operation completed successfully", "Done!"),
        "message.error": ("An error occurred", "Something went wrong", "Error: {message}"),
        "form.required": ("This field is required", "Required field", "Please fill this field"),
        "error.not_found": ("Not found", "Resource not found", "404 - Not Found"),
    },
    "fr": {
        "app.welcome": ("Bienvenue", "Bienvenue sur {app}", "Bonjour, bienvenue !"),
        "app.title": ("{app} - Tableau de bord", "Application {app}", "Plateforme {app}"),
        "button.save": ("Enregistrer", "Enregistrer les modifications", "Enregistrer maintenant"),
        "button.cancel": ("Annuler", "Annuler les modifications", "Retour"),
        "message.success": ("Succès !", "Opération réussie", "Terminé !"),
        "message.error": ("Une erreur est survenue", "Quelque chose s'est mal passé", "Erreur : {message}"),
        "form.required": ("Ce champ est requis", "Champ requis", "Veuillez remplir ce champ"),
        "error.not_found": ("Non trouvé", "Ressource non trouvée", "404 - Non trouvé"),
    },
    "es": {
        "app.welcome": ("Bienvenido", "Bienvenido a {app}", "¡Hola, bienvenido!"),
        "app.title": ("{app} - Panel", "Aplicación {app}", "Plataforma {app}"),
        "button.save": ("Guardar", "Guardar cambios", "Guardar ahora"),
        "button.cancel": ("Cancelar", "Cancelar cambios", "Volver"),
        "message.success": ("¡Éxito!", "Operación completada con éxito", "¡Hecho!"),
        "message.error": ("Ocurrió un error", "Algo salió mal", "Error: {message}"),
        "form.required": ("Este campo es obligatorio", "Campo obligatorio", "Por favor complete este campo"),
        "error.not_found": ("No encontrado", "Recurso no encontrado", "404 - No encontrado"),
    },
}

FALLBACK_TEXT: Dict[str, Dict[str, str]] = {
    "en": {
        "app": "Application", "button": "Click here", "message": "Message",
        "form": "Form field", "error": "Error occurred", "page": "Page content",
        "field": "Field", "status": "Status",
    },
    "fr": {
        "app": "Application", "button": "Cliquez ici", "message": "Message",
        "form": "Champ de formulaire", "error": "Erreur survenue",
        "page": "Contenu de la page", "field": "Champ", "status": "Statut",
    },
    "es": {
        "app": "Aplicación", "button": "Haga clic aquí", "message": "Mensaje",
        "form": "Campo de formulario", "error": "Error ocurrido",
        "page": "Contenido de la página", "field": "Campo", "status": "Estado",
    },
}

APP_NAMES = ("MyApp", "Application", "Platform")
MESSAGES = ("Invalid input", "Server error", "Network timeout")


@dataclass
class GeneratedRow:
    locale: str
    key: str
    content: str
    tag_names: List[str] = field(default_factory=list)


class TranslationGenerator:
    """
    Produces random but plausible translation rows.

    Locales are weighted en 50% / fr 30% / es 20%; one key in five gets a
    numeric suffix; each row gets 1 to 3 tags from a category-dependent pool.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def pick_locale(self) -> str:
        roll = self._rng.randint(1, 100)
        if roll <= 50:
            return "en"
        if roll <= 80:
            return "fr"
        return "es"

    def pick_key(self) -> Tuple[str, str]:
        category = self._rng.choice(list(KEY_PATTERNS))
        sub_key = self._rng.choice(KEY_PATTERNS[category])
        suffix = f".{self._rng.randint(1, 1000)}" if self._rng.randint(1, 100) <= 20 else ""
        return category, f"{category}.{sub_key}{suffix}"

    def tag_pool(self, category: str) -> Sequence[str]:
        if category in ("app", "page", "form"):
            return WEB_TAGS + MOBILE_TAGS + BACKEND_TAGS
        if category in ("button", "field"):
            if self._rng.randint(1, 100) <= 70:
                return WEB_TAGS + MOBILE_TAGS
            return BACKEND_TAGS
        return DEFAULT_TAGS

    def content_for(self, key: str, locale: str) -> str:
        parts = key.split(".")
        templates = CONTENT_TEMPLATES.get(locale, {}).get(".".join(parts[:2]))
        if templates:
            text = self._rng.choice(templates)
            text = text.replace("{app}", self._rng.choice(APP_NAMES))
            return text.replace("{message}", self._rng.choice(MESSAGES))

        category = parts[0] or "app"
        base = (
            FALLBACK_TEXT.get(locale, {}).get(category)
            or FALLBACK_TEXT["en"].get(category)
            or "Content"
        )
        item = parts[1] if len(parts) > 1 else "item"
        return f"{base} - {item.replace('_', ' ').capitalize()}"

    def row(self) -> GeneratedRow:
        category, key = self.pick_key()
        locale = self.pick_locale()
        pool = self.tag_pool(category)
        count = self._rng.randint(1, min(3, len(pool)))
        return GeneratedRow(
            locale=locale,
            key=key,
            content=self.content_for(key, locale),
            tag_names=self._rng.sample(list(pool), count),
        )


@dataclass(frozen=True)
class PopulateReport:
    inserted: int
    batches: int
    seconds: float


def populate(
    session: Session,
    count: int,
    *,
    batch_size: int = 1000,
    generator: Optional[TranslationGenerator] = None,
    on_batch: Optional[Callable[[int], None]] = None,
) -> PopulateReport:
    """
    Insert ``count`` generated translations with their tag associations.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    if batch_size <= 0:
        raise ValueError("batch_size must be > 0")

    generator = generator or TranslationGenerator()
    started = time.perf_counter()

    tag_ids = {tag.name: tag.id for tag in TagsRepository(session).ensure(DEFAULT_TAGS)}
    session.commit()
    log.info("populate_tags_ready", tags=sorted(tag_ids))

    batches = -(-count // batch_size)
    inserted = 0

    for batch_index in range(batches):
        size = min(batch_size, count - inserted)
        now = models.utcnow()
        rows = [generator.row() for _ in range(size)]
        translations: List[dict] = []

        for generated in rows:
            translations.append(
                {
                    "locale": generated.locale,
                    "key": generated.key,
                    "content": generated.content,
                    "created_at": now,
                    "updated_at": now,
                }
            )

        # Ids come back in parameter order, so they line up with `rows`.
        table = models.Translation.__table__
        new_ids = session.execute(
            insert(table).returning(table.c.id, sort_by_parameter_order=True),
            translations,
        ).scalars().all()
        associations: List[dict] = [
            {"translation_id": translation_id, "tag_id": tag_ids[name]}
            for translation_id, generated in zip(new_ids, rows)
            for name in generated.tag_names
        ]
        session.execute(insert(models.translation_tag), associations)
        session.commit()

        inserted += size
        if on_batch is not None:
            on_batch(size)
        log.debug("populate_batch", batch=batch_index + 1, of=batches, inserted=inserted)

        del rows, translations, associations
        if batch_index % 10 == 0:
            gc.collect()

    report = PopulateReport(
        inserted=inserted,
        batches=batches,
        seconds=round(time.perf_counter() - started, 2),
    )
    log.info("populate_finished", inserted=report.inserted, seconds=report.seconds)
    return report


__all__ = [
    "DEFAULT_TAGS",
    "GeneratedRow",
    "PopulateReport",
    "TranslationGenerator",
    "populate",
]
