"""
Translation editor service.

Drives the batch translation workflow for one edit draft: reading rows
with pending edits overlaid, recording edits, filling blanks with AI
suggestions, and persisting or discarding the ledger.

Dependencies: agrideck.boundary.db, agrideck.core
System role: Translation editing use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from agrideck.application.services.edit_draft_store import EditDraft, EditDraftStore
from agrideck.boundary.db.CRUD.translation_crud import TranslationCRUD
from agrideck.boundary.db.translatable import TranslatableEntity, get_translatable
from agrideck.core.change_ledger import NAME_FIELD, NEEDS_REVIEW_FIELD
from agrideck.core.entities import EntityKind
from agrideck.core.exceptions import PersistenceError, ValidationError
from agrideck.core.gemini import GeminiGateway
from agrideck.core.table_query import PaginationState

logger = logging.getLogger(__name__)


def serialize_entity(entity: TranslatableEntity, row: Any) -> dict[str, Any]:
    """Flatten a base row and its translations into plain dicts."""
    data: dict[str, Any] = {"id": row.id, "name": row.name}
    if entity.kind == EntityKind.COMMODITY:
        data["image"] = row.image
    elif entity.kind == EntityKind.MANDI:
        data["district"] = row.district.name if row.district else None
        data["state"] = row.state.name if row.state else None

    data[entity.translations_key] = [
        {
            "language_code": t.language_code,
            **{f: getattr(t, f) for f in entity.translated_fields},
            NEEDS_REVIEW_FIELD: bool(t.needs_review),
        }
        for t in getattr(row, entity.translations_key)
    ]
    return data


class TranslationEditorService:
    """Translation editor orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        store: EditDraftStore,
        gateway: GeminiGateway | None = None,
    ) -> None:
        """
        Initialize editor service.

        Args:
            db: Async SQLAlchemy session
            store: Process-wide draft store
            gateway: Gemini gateway, needed only for suggestions
        """
        self.db = db
        self.store = store
        self.gateway = gateway

    def create_draft(self, entity: str | EntityKind) -> EditDraft:
        return self.store.create(get_translatable(entity).kind)

    def get_draft(self, draft_id: UUID) -> EditDraft:
        return self.store.get(draft_id)

    def record_change(
        self,
        draft_id: UUID,
        entity_id: Any,
        entity_name: str,
        field: str,
        old_value: str | bool | None,
        new_value: str | bool,
        language_code: str | None = None,
    ) -> EditDraft:
        """
        Add one edit to a draft's ledger.

        A base rename has no language code and must target "name"; a
        translation edit must target a translated field or needs_review.

        Raises:
            ValidationError: If field or value type does not fit the entity
        """
        draft = self.store.get(draft_id)
        entity = get_translatable(draft.entity)
        ledger = draft.ledger

        if language_code is None:
            if field != NAME_FIELD:
                raise ValidationError(
                    f"Only '{NAME_FIELD}' can change without a language code",
                    field="field",
                )
            if not isinstance(new_value, str) or not new_value.strip():
                raise ValidationError("Name must be a non-empty string", field="new_value")
            ledger.update_item_name(entity_id, str(old_value or ""), new_value)
        elif field == NEEDS_REVIEW_FIELD:
            if not isinstance(new_value, bool):
                raise ValidationError("needs_review must be a boolean", field="new_value")
            ledger.toggle_needs_review(entity_id, entity_name, language_code, bool(old_value), new_value)
        elif field in entity.translated_fields:
            if not isinstance(new_value, str):
                raise ValidationError(f"{field} must be a string", field="new_value")
            ledger.update_translation(
                entity_id,
                entity_name,
                language_code,
                field,
                old_value if isinstance(old_value, str) else None,
                new_value,
            )
        else:
            raise ValidationError(
                f"Field '{field}' is not editable for {entity.kind.value}",
                field="field",
            )

        logger.debug(
            f"{__name__}:record_change - ledger size {len(ledger)}",
            extra={"draft_id": str(draft_id), "entity_id": str(entity_id), "field": field},
        )
        return draft

    async def list_rows(
        self,
        draft_id: UUID,
        language_code: str | None = None,
        search: str | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> tuple[list[dict[str, Any]], PaginationState]:
        """
        Entity rows with the draft's pending changes applied.

        Args:
            draft_id: Draft to overlay
            language_code: Keep only this language's translation entry
            search: Case-insensitive filter on the English name
            page: 1-based page
            page_size: Rows per page

        Returns:
            (rows for the page, pagination state)
        """
        if page < 1 or page_size < 1:
            raise ValidationError("page and page_size must be positive", field="page")

        draft = self.store.get(draft_id)
        entity = get_translatable(draft.entity)
        crud = TranslationCRUD(entity)

        records = await crud.list_with_translations(self.db, search=search)
        rows = draft.ledger.overlay(
            [serialize_entity(entity, r) for r in records],
            entity.translations_key,
        )
        if language_code:
            for row in rows:
                row[entity.translations_key] = [
                    t for t in row[entity.translations_key] if t["language_code"] == language_code
                ]

        pagination = PaginationState(page=page, page_size=page_size, total_count=len(rows))
        start = (page - 1) * page_size
        return rows[start:start + page_size], pagination

    async def save(self, draft_id: UUID) -> dict[str, int]:
        """
        Persist every pending change of a draft.

        Renames go first, then one upsert per (entity, language). Each write
        is committed on its own, in order. The first failure stops the run
        and leaves the ledger untouched; writes already committed stay.

        Returns:
            {"renamed": n, "upserted": m}

        Raises:
            PersistenceError: If any write fails
        """
        draft = self.store.get(draft_id)
        ledger = draft.ledger
        if ledger.is_empty:
            return {"renamed": 0, "upserted": 0}

        entity = get_translatable(draft.entity)
        crud = TranslationCRUD(entity)
        renames, _ = ledger.partition()
        upserts = ledger.group_translation_upserts(entity.fk_column)

        logger.info(
            f"{__name__}:save - START",
            extra={
                "draft_id": str(draft_id),
                "entity": entity.kind.value,
                "renames": len(renames),
                "upserts": len(upserts),
            },
        )

        applied = 0
        try:
            for change in renames:
                await crud.rename(self.db, change.entity_id, str(change.new_value))
                await self.db.commit()
                applied += 1
            for payload in upserts:
                await crud.upsert_translation(self.db, payload)
                await self.db.commit()
                applied += 1
        except Exception as e:
            await self.db.rollback()
            logger.error(
                f"{__name__}:save - FAILED after {applied} writes - {type(e).__name__}: {e}",
                extra={"draft_id": str(draft_id)},
            )
            raise PersistenceError(
                f"Failed to save changes: {e}",
                applied=applied,
                details={"draft_id": str(draft_id)},
            ) from e

        ledger.discard()
        logger.info(
            f"{__name__}:save - END",
            extra={"draft_id": str(draft_id), "applied": applied},
        )
        return {"renamed": len(renames), "upserted": len(upserts)}

    def discard(self, draft_id: UUID) -> None:
        """Drop a draft and its pending changes without touching the database."""
        draft = self.store.get(draft_id)
        dropped = len(draft.ledger)
        draft.ledger.discard()
        self.store.remove(draft_id)
        logger.info(
            f"{__name__}:discard - dropped {dropped} pending changes",
            extra={"draft_id": str(draft_id)},
        )

    async def suggest(self, draft_id: UUID, language_code: str, language_name: str) -> dict[str, int]:
        """
        Fill blank translations with AI suggestions as pending changes.

        Entities with no (or a blank) translation in language_code are
        batch translated, first max_batch_items by name. Each non-empty
        answer is recorded in the ledger for review; nothing is written.

        Returns:
            {"requested", "succeeded", "failed"}
        """
        if self.gateway is None:
            raise ValidationError("AI suggestions are not available")

        draft = self.store.get(draft_id)
        entity = get_translatable(draft.entity)
        crud = TranslationCRUD(entity)

        candidates = await crud.list_missing_translation(
            self.db,
            language_code,
            limit=self.gateway.settings.max_batch_items,
        )
        if not candidates:
            return {"requested": 0, "succeeded": 0, "failed": 0}

        items = []
        for record in candidates:
            item = {"id": record.id, "name": record.name}
            if entity.kind == EntityKind.MANDI:
                item["district"] = record.district.name if record.district else ""
            items.append(item)

        results = await self.gateway.batch_translate(entity.kind, items, language_code, language_name)

        succeeded = 0
        for item, result in zip(items, results):
            if entity.kind == EntityKind.MANDI:
                proposed = {"name": result["name"], "district": result["district"]}
            else:
                proposed = {"name": result["translation"]}
            if not proposed["name"]:
                continue
            for field, value in proposed.items():
                if value:
                    draft.ledger.update_translation(
                        item["id"], item["name"], language_code, field, None, value
                    )
            succeeded += 1

        summary = {"requested": len(items), "succeeded": succeeded, "failed": len(items) - succeeded}
        logger.info(
            f"{__name__}:suggest - END",
            extra={"draft_id": str(draft_id), "language_code": language_code, **summary},
        )
        return summary
