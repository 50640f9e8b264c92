"""
Test suite for TranslationEditorService.

Exercises the draft workflow end to end against the seeded catalog:
overlaying, saving, discarding and AI suggestions.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy import select

from agrideck.application.services import EditDraftStore, TranslationEditorService
from agrideck.boundary.db.models import CommodityModel, CommodityTranslationModel
from agrideck.core.exceptions import EntityNotFoundError, PersistenceError, ValidationError


@pytest.fixture
def store() -> EditDraftStore:
    return EditDraftStore()


@pytest.fixture
def editor(seeded_db, store) -> TranslationEditorService:
    return TranslationEditorService(db=seeded_db, store=store)


async def _commodity_names(db) -> dict[int, str]:
    result = await db.execute(select(CommodityModel.id, CommodityModel.name))
    return dict(result.all())


async def _translations(db) -> dict[tuple[int, str], tuple]:
    result = await db.execute(
        select(
            CommodityTranslationModel.commodity_id,
            CommodityTranslationModel.language_code,
            CommodityTranslationModel.name,
            CommodityTranslationModel.unit,
            CommodityTranslationModel.needs_review,
        )
    )
    return {(r[0], r[1]): tuple(r[2:]) for r in result.all()}


class TestRecordChange:
    def test_unknown_entity_rejected(self, editor) -> None:
        with pytest.raises(ValidationError):
            editor.create_draft("district")

    def test_rename_requires_name_field(self, editor) -> None:
        draft = editor.create_draft("commodity")

        with pytest.raises(ValidationError):
            editor.record_change(draft.id, 1, "Tomato", "unit", "", "kg")

    def test_rename_rejects_blank_name(self, editor) -> None:
        draft = editor.create_draft("commodity")

        with pytest.raises(ValidationError):
            editor.record_change(draft.id, 1, "Tomato", "name", "Tomato", "  ")

    def test_needs_review_must_be_boolean(self, editor) -> None:
        draft = editor.create_draft("commodity")

        with pytest.raises(ValidationError):
            editor.record_change(draft.id, 1, "Tomato", "needs_review", True, "no", "hi")

    def test_field_not_translated_for_entity(self, editor) -> None:
        draft = editor.create_draft("state")

        with pytest.raises(ValidationError):
            editor.record_change(draft.id, 1, "Karnataka", "unit", "", "x", "hi")

    def test_unknown_draft(self, editor) -> None:
        with pytest.raises(EntityNotFoundError):
            editor.record_change(uuid4(), 1, "Tomato", "name", "Tomato", "Tomatoes")


class TestListRows:
    async def test_rows_show_pending_edits(self, editor) -> None:
        draft = editor.create_draft("commodity")
        editor.record_change(draft.id, 3, "Wheat", "name", None, "गेहूं", "hi")
        editor.record_change(draft.id, 1, "Tomato", "name", "Tomato", "Tomatoes")

        rows, pagination = await editor.list_rows(draft.id, language_code="hi")

        by_id = {r["id"]: r for r in rows}
        assert by_id[1]["name"] == "Tomatoes"
        assert by_id[3]["commodity_translations"] == [
            {"language_code": "hi", "needs_review": True, "name": "गेहूं"}
        ]
        assert pagination.total_count == 3

    async def test_language_filter_and_paging(self, editor) -> None:
        draft = editor.create_draft("commodity")

        rows, pagination = await editor.list_rows(draft.id, language_code="ta", page=2, page_size=2)

        assert [r["name"] for r in rows] == ["Wheat"]
        assert rows[0]["commodity_translations"] == []
        assert pagination.total_pages == 2

    async def test_mandi_rows_carry_location_names(self, editor) -> None:
        draft = editor.create_draft("mandi")

        rows, _ = await editor.list_rows(draft.id)

        assert rows[0]["district"] == "Mysuru"
        assert rows[0]["state"] == "Karnataka"


class TestSave:
    async def test_save_persists_exactly_the_edited_fields(self, editor, seeded_db) -> None:
        draft = editor.create_draft("commodity")
        editor.record_change(draft.id, 1, "Tomato", "name", "Tomato", "Tomatoes")
        editor.record_change(draft.id, 1, "Tomato", "needs_review", False, True, "hi")
        editor.record_change(draft.id, 2, "Onion", "name", "  ", "प्याज", "hi")
        editor.record_change(draft.id, 3, "Wheat", "name", None, "கோதுமை", "ta")

        result = await editor.save(draft.id)

        assert result == {"renamed": 1, "upserted": 3}
        assert draft.ledger.is_empty
        assert await _commodity_names(seeded_db) == {1: "Tomatoes", 2: "Onion", 3: "Wheat"}
        assert await _translations(seeded_db) == {
            (1, "hi"): ("टमाटर", "किलो", True),
            (2, "hi"): ("प्याज", None, True),
            (3, "ta"): ("கோதுமை", None, True),
        }

    async def test_empty_ledger_writes_nothing(self, editor) -> None:
        draft = editor.create_draft("commodity")

        assert await editor.save(draft.id) == {"renamed": 0, "upserted": 0}

    async def test_reverted_edit_is_not_saved(self, editor, seeded_db) -> None:
        draft = editor.create_draft("commodity")
        editor.record_change(draft.id, 1, "Tomato", "unit", "किलो", "kg", "hi")
        editor.record_change(draft.id, 1, "Tomato", "unit", "किलो", "किलो", "hi")

        assert await editor.save(draft.id) == {"renamed": 0, "upserted": 0}
        assert (await _translations(seeded_db))[(1, "hi")] == ("टमाटर", "किलो", False)

    async def test_failure_keeps_ledger_and_reports_applied(self, editor, seeded_db) -> None:
        draft = editor.create_draft("commodity")
        editor.record_change(draft.id, 3, "Wheat", "name", "Wheat", "Durum Wheat")
        editor.record_change(draft.id, 999, "Ghost", "name", "Ghost", "Still Ghost")

        with pytest.raises(PersistenceError) as exc_info:
            await editor.save(draft.id)

        assert exc_info.value.applied == 1
        assert len(draft.ledger) == 2
        assert (await _commodity_names(seeded_db))[3] == "Durum Wheat"


class TestDiscard:
    async def test_discard_leaves_database_untouched(self, editor, store, seeded_db) -> None:
        before = await _translations(seeded_db)
        draft = editor.create_draft("commodity")
        editor.record_change(draft.id, 1, "Tomato", "name", "टमाटर", "टोमेटो", "hi")
        editor.record_change(draft.id, 2, "Onion", "name", "Onion", "Red Onion")

        editor.discard(draft.id)

        assert len(store) == 0
        assert await _translations(seeded_db) == before
        assert (await _commodity_names(seeded_db))[2] == "Onion"


class TestSuggest:
    async def test_suggestions_become_pending_changes(self, seeded_db, store, make_gateway, gemini_fakes) -> None:
        gateway, client = make_gateway(
            gemini_fakes.text('[{"index": 1, "translation": "प्याज"}, {"index": 2, "translation": ""}]')
        )
        editor = TranslationEditorService(db=seeded_db, store=store, gateway=gateway)
        draft = editor.create_draft("commodity")

        summary = await editor.suggest(draft.id, "hi", "Hindi")

        assert summary == {"requested": 2, "succeeded": 1, "failed": 1}
        assert len(client.models.calls) == 1
        [change] = draft.ledger.pending
        assert (change.entity_id, change.field, change.new_value, change.language_code) == (
            2,
            "name",
            "प्याज",
            "hi",
        )
        assert (await _translations(seeded_db))[(2, "hi")][0] == "  "

    async def test_mandi_suggestion_records_name_and_district(self, seeded_db, store) -> None:
        gateway = AsyncMock()
        gateway.settings.max_batch_items = 100
        gateway.batch_translate.return_value = [{"id": 5, "name": "मैसूरु", "district": "मैसूरु"}]
        editor = TranslationEditorService(db=seeded_db, store=store, gateway=gateway)
        draft = editor.create_draft("mandi")

        summary = await editor.suggest(draft.id, "hi", "Hindi")

        assert summary["succeeded"] == 1
        assert {c.field for c in draft.ledger.pending} == {"name", "district"}
        items = gateway.batch_translate.call_args.args[1]
        assert items == [{"id": 5, "name": "Mysuru APMC", "district": "Mysuru"}]

    async def test_only_untranslated_entities_are_sent(self, seeded_db, store) -> None:
        gateway = AsyncMock()
        gateway.settings.max_batch_items = 100
        gateway.batch_translate.return_value = [{"id": 2, "translation": "केरल"}]
        editor = TranslationEditorService(db=seeded_db, store=store, gateway=gateway)
        draft = editor.create_draft("state")

        summary = await editor.suggest(draft.id, "hi", "Hindi")

        assert summary == {"requested": 1, "succeeded": 1, "failed": 0}
        items = gateway.batch_translate.call_args.args[1]
        assert items == [{"id": 2, "name": "Kerala"}]

    async def test_nothing_missing_makes_no_call(self, seeded_db, store) -> None:
        gateway = AsyncMock()
        gateway.settings.max_batch_items = 100
        editor = TranslationEditorService(db=seeded_db, store=store, gateway=gateway)
        draft = editor.create_draft("state")
        editor.record_change(draft.id, 2, "Kerala", "name", None, "केरल", "hi")
        await editor.save(draft.id)

        summary = await editor.suggest(draft.id, "hi", "Hindi")

        assert summary == {"requested": 0, "succeeded": 0, "failed": 0}
        gateway.batch_translate.assert_not_called()

    async def test_requires_gateway(self, editor) -> None:
        draft = editor.create_draft("commodity")

        with pytest.raises(ValidationError):
            await editor.suggest(draft.id, "hi", "Hindi")
