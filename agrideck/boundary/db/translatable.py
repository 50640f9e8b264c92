"""
Registry of translatable entities.

Each entity kind pairs a base table (English canonical name) with a
one-to-many translations table keyed by (entity_id, language_code).

Dependencies: agrideck.boundary.db.models
System role: Single source of table/column names for translation workflows
"""

from dataclasses import dataclass

from agrideck.boundary.db.base import Base
from agrideck.boundary.db.models import (
    CommodityModel,
    CommodityTranslationModel,
    MandiModel,
    MandiTranslationModel,
    StateModel,
    StateTranslationModel,
)
from agrideck.core.entities import EntityKind, parse_entity_kind


@dataclass(frozen=True)
class TranslatableEntity:
    """Table metadata for one translatable entity kind."""

    kind: EntityKind
    label: str
    model: type[Base]
    translation_model: type[Base]
    translations_key: str
    fk_column: str
    translated_fields: tuple[str, ...]
    required_text_fields: tuple[str, ...]

    @property
    def conflict_columns(self) -> tuple[str, str]:
        """Columns of the translation table's unique key."""
        return (self.fk_column, "language_code")

    def new_row_defaults(self) -> dict:
        """Values for columns a brand-new translation row must carry."""
        defaults: dict = {field: "" for field in self.required_text_fields}
        defaults["needs_review"] = True
        return defaults


TRANSLATABLE_ENTITIES: dict[EntityKind, TranslatableEntity] = {
    EntityKind.COMMODITY: TranslatableEntity(
        kind=EntityKind.COMMODITY,
        label="Commodities",
        model=CommodityModel,
        translation_model=CommodityTranslationModel,
        translations_key="commodity_translations",
        fk_column="commodity_id",
        translated_fields=("name", "unit"),
        required_text_fields=("name",),
    ),
    EntityKind.MANDI: TranslatableEntity(
        kind=EntityKind.MANDI,
        label="Mandis",
        model=MandiModel,
        translation_model=MandiTranslationModel,
        translations_key="mandi_translations",
        fk_column="mandi_id",
        translated_fields=("name", "district"),
        required_text_fields=("name", "district"),
    ),
    EntityKind.STATE: TranslatableEntity(
        kind=EntityKind.STATE,
        label="States",
        model=StateModel,
        translation_model=StateTranslationModel,
        translations_key="state_translations",
        fk_column="state_id",
        translated_fields=("name",),
        required_text_fields=("name",),
    ),
}


def get_translatable(kind: str | EntityKind) -> TranslatableEntity:
    """
    Look up the registry entry for an entity kind.

    Raises:
        ValidationError: If kind is not a translatable entity
    """
    return TRANSLATABLE_ENTITIES[parse_entity_kind(kind)]
