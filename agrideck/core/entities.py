"""
Translatable entity kinds.

Dependencies: None (pure domain layer)
System role: Shared vocabulary for editor, gateway and persistence
"""

import enum

from agrideck.core.exceptions import ValidationError


class EntityKind(str, enum.Enum):
    """Entity kinds that carry per-language translation rows."""

    COMMODITY = "commodity"
    MANDI = "mandi"
    STATE = "state"


def parse_entity_kind(kind: "str | EntityKind") -> EntityKind:
    """
    Resolve a kind name.

    Raises:
        ValidationError: If kind is not a translatable entity
    """
    try:
        return EntityKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown entity type: {kind}", field="entity") from None
