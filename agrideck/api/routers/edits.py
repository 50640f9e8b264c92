"""
Translation edit draft API endpoints.

Routes:
- POST /admin/edits - Open a draft for an entity kind
- GET /admin/edits/{id} - Draft with pending changes
- POST /admin/edits/{id}/changes - Record one edit
- GET /admin/edits/{id}/rows - Entity rows with pending edits applied
- POST /admin/edits/{id}/suggest - Queue AI translations for blank entries
- POST /admin/edits/{id}/save - Persist pending changes
- DELETE /admin/edits/{id} - Discard the draft

Dependencies: agrideck.application.services, agrideck.models.edits
System role: Batch translation editing HTTP API
"""

import dataclasses
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from agrideck.api.deps.dependencies import get_translation_editor_service
from agrideck.application.services import EditDraft, TranslationEditorService
from agrideck.core.table_query import DEFAULT_PAGE_SIZE
from agrideck.models.common import PaginationResponse
from agrideck.models.edits import (
    ChangeRequest,
    CreateDraftRequest,
    DraftResponse,
    DraftRowsResponse,
    PendingChangeResponse,
    SaveResponse,
    SuggestRequest,
    SuggestResponse,
)

from .error_handling import handle_admin_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/edits", tags=["translation-edits"])


def map_draft_to_response(draft: EditDraft) -> DraftResponse:
    return DraftResponse(
        id=draft.id,
        entity=draft.entity.value,
        created_at=draft.created_at,
        pending=[
            PendingChangeResponse(**dataclasses.asdict(change))
            for change in draft.ledger.pending
        ],
    )


@router.post("", response_model=DraftResponse, status_code=201)
@handle_admin_errors
async def create_draft(
    request: CreateDraftRequest,
    editor: TranslationEditorService = Depends(get_translation_editor_service),
) -> DraftResponse:
    """
    Open an empty edit draft.

    Raises:
        HTTPException(400): Unknown entity
    """
    return map_draft_to_response(editor.create_draft(request.entity))


@router.get("/{draft_id}", response_model=DraftResponse)
@handle_admin_errors
async def get_draft(
    draft_id: UUID,
    editor: TranslationEditorService = Depends(get_translation_editor_service),
) -> DraftResponse:
    return map_draft_to_response(editor.get_draft(draft_id))


@router.post("/{draft_id}/changes", response_model=DraftResponse)
@handle_admin_errors
async def record_change(
    draft_id: UUID,
    request: ChangeRequest,
    editor: TranslationEditorService = Depends(get_translation_editor_service),
) -> DraftResponse:
    """
    Record one edit; a later edit of the same field replaces it, and an
    edit back to the original value drops it.

    Raises:
        HTTPException(400): Field not editable or wrong value type
        HTTPException(404): Draft not found
    """
    draft = editor.record_change(
        draft_id,
        entity_id=request.entity_id,
        entity_name=request.entity_name,
        field=request.field,
        old_value=request.old_value,
        new_value=request.new_value,
        language_code=request.language_code,
    )
    return map_draft_to_response(draft)


@router.get("/{draft_id}/rows", response_model=DraftRowsResponse)
@handle_admin_errors
async def list_rows(
    draft_id: UUID,
    language: str | None = None,
    search: str | None = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=1000),
    editor: TranslationEditorService = Depends(get_translation_editor_service),
) -> DraftRowsResponse:
    """Entity rows as they will look after saving."""
    rows, pagination = await editor.list_rows(
        draft_id,
        language_code=language,
        search=search,
        page=page,
        page_size=page_size,
    )
    return DraftRowsResponse(rows=rows, pagination=PaginationResponse.from_state(pagination))


@router.post("/{draft_id}/suggest", response_model=SuggestResponse)
@handle_admin_errors
async def suggest_translations(
    draft_id: UUID,
    request: SuggestRequest,
    editor: TranslationEditorService = Depends(get_translation_editor_service),
) -> SuggestResponse:
    """
    Batch translate entities missing a translation and queue the results.

    Raises:
        HTTPException(429): Gemini quota exhausted
        HTTPException(500): Gemini not configured or failed
    """
    logger.info(
        f"{__name__}:suggest_translations - draft {draft_id}",
        extra={"language_code": request.language_code},
    )
    summary = await editor.suggest(draft_id, request.language_code, request.language_name)
    return SuggestResponse(**summary)


@router.post("/{draft_id}/save", response_model=SaveResponse)
@handle_admin_errors
async def save_draft(
    draft_id: UUID,
    editor: TranslationEditorService = Depends(get_translation_editor_service),
) -> SaveResponse:
    """
    Persist pending changes; the draft stays open and empty on success.

    Raises:
        HTTPException(404): Draft not found
        HTTPException(500): A write failed; pending changes are kept
    """
    result = await editor.save(draft_id)
    return SaveResponse(**result)


@router.delete("/{draft_id}", status_code=204)
@handle_admin_errors
async def discard_draft(
    draft_id: UUID,
    editor: TranslationEditorService = Depends(get_translation_editor_service),
) -> Response:
    """Discard pending changes without touching the database."""
    editor.discard(draft_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
