"""
Pending-change ledger for batch translation editing.

Accumulates edits to base names and translation fields until they are
saved or discarded. Holds at most one change per
(entity_id, field, language_code) key; an edit that restores the
original value removes the change entirely.

Dependencies: None (pure domain layer)
System role: In-memory edit buffer behind the translation editor
"""

import copy
from dataclasses import dataclass
from typing import Any, Iterable

NAME_FIELD = "name"
NEEDS_REVIEW_FIELD = "needs_review"

ChangeValue = str | bool
ChangeKey = tuple[Any, str, str | None]


@dataclass(frozen=True)
class PendingChange:
    """
    One uncommitted edit.

    Attributes:
        entity_id: Primary key of the base entity
        entity_name: English name shown in review screens
        field: Column being changed ("name", "unit", "district", "needs_review")
        old_value: Value before the edit
        new_value: Value after the edit
        language_code: Target language; None for a base-name rename
    """

    entity_id: Any
    entity_name: str
    field: str
    old_value: ChangeValue
    new_value: ChangeValue
    language_code: str | None = None

    @property
    def key(self) -> ChangeKey:
        return (self.entity_id, self.field, self.language_code)

    @property
    def is_rename(self) -> bool:
        return self.language_code is None


class ChangeLedger:
    """
    Ordered collection of pending changes.

    Insertion order is preserved; re-editing a key moves it to the end.
    """

    def __init__(self) -> None:
        self._changes: list[PendingChange] = []

    def __len__(self) -> int:
        return len(self._changes)

    @property
    def is_empty(self) -> bool:
        return not self._changes

    @property
    def pending(self) -> list[PendingChange]:
        """Copy of the pending changes in insertion order."""
        return list(self._changes)

    def add_change(self, change: PendingChange) -> None:
        """
        Record a change, replacing any earlier change with the same key.

        A change whose new value equals its old value only removes the
        earlier entry, so reverting an edit leaves nothing pending.
        """
        self._changes = [c for c in self._changes if c.key != change.key]
        if change.new_value == change.old_value:
            return
        self._changes.append(change)

    def update_item_name(self, entity_id: Any, current_name: str, new_name: str) -> None:
        """Rename the base entity."""
        self.add_change(
            PendingChange(
                entity_id=entity_id,
                entity_name=current_name,
                field=NAME_FIELD,
                old_value=current_name,
                new_value=new_name,
            )
        )

    def update_translation(
        self,
        entity_id: Any,
        entity_name: str,
        language_code: str,
        field: str,
        current_value: str | None,
        new_value: str,
    ) -> None:
        """Edit one translated field; a missing current value counts as ""."""
        self.add_change(
            PendingChange(
                entity_id=entity_id,
                entity_name=entity_name,
                field=field,
                old_value=current_value or "",
                new_value=new_value,
                language_code=language_code,
            )
        )

    def toggle_needs_review(
        self,
        entity_id: Any,
        entity_name: str,
        language_code: str,
        current: bool,
        new: bool,
    ) -> None:
        self.add_change(
            PendingChange(
                entity_id=entity_id,
                entity_name=entity_name,
                field=NEEDS_REVIEW_FIELD,
                old_value=bool(current),
                new_value=bool(new),
                language_code=language_code,
            )
        )

    def remove_translation(
        self,
        entity_id: Any,
        entity_name: str,
        language_code: str,
        field: str,
        current_value: str | None,
    ) -> None:
        """Blank out a translated field."""
        self.update_translation(entity_id, entity_name, language_code, field, current_value, "")

    def partition(self) -> tuple[list[PendingChange], list[PendingChange]]:
        """Split into (renames, translation changes)."""
        renames = [c for c in self._changes if c.is_rename]
        translations = [c for c in self._changes if not c.is_rename]
        return renames, translations

    def group_translation_upserts(self, fk_column: str) -> list[dict[str, Any]]:
        """
        Merge translation changes into one upsert payload per (entity, language).

        Args:
            fk_column: Foreign-key column of the translations table (e.g. "commodity_id")

        Returns:
            Payloads like {fk_column: id, "language_code": code, field: value, ...}
            in first-seen order
        """
        groups: dict[tuple[Any, str], dict[str, Any]] = {}
        for change in self._changes:
            if change.is_rename:
                continue
            group_key = (change.entity_id, change.language_code)
            payload = groups.setdefault(
                group_key,
                {fk_column: change.entity_id, "language_code": change.language_code},
            )
            payload[change.field] = change.new_value
        return list(groups.values())

    def discard(self) -> None:
        self._changes.clear()

    def overlay(self, rows: Iterable[dict[str, Any]], translations_key: str) -> list[dict[str, Any]]:
        """
        Apply pending changes to serialized rows without mutating them.

        Args:
            rows: Entity dicts carrying "id", "name" and a list of translation dicts
            translations_key: Key of the translation list in each row

        Returns:
            Copies of rows as they will look once the ledger is saved. A
            translation for a language with no row yet appears as a new entry
            flagged needs_review.
        """
        by_entity: dict[Any, list[PendingChange]] = {}
        for change in self._changes:
            by_entity.setdefault(change.entity_id, []).append(change)

        result = []
        for row in rows:
            row = copy.deepcopy(row)
            for change in by_entity.get(row.get("id"), []):
                if change.is_rename:
                    row[change.field] = change.new_value
                    continue
                translations = row.setdefault(translations_key, [])
                entry = next(
                    (t for t in translations if t.get("language_code") == change.language_code),
                    None,
                )
                if entry is None:
                    entry = {"language_code": change.language_code, NEEDS_REVIEW_FIELD: True}
                    translations.append(entry)
                entry[change.field] = change.new_value
            result.append(row)
        return result
