"""
Translation catalog API endpoints.

Routes:
- GET /admin/languages - Target languages ordered by code
- GET /admin/translations/overview - Coverage per entity kind

Dependencies: agrideck.application.services, agrideck.models.dashboard
System role: Translation reference data HTTP API
"""

from fastapi import APIRouter, Depends

from agrideck.api.deps.dependencies import get_dashboard_service
from agrideck.application.services import DashboardService
from agrideck.models.dashboard import LanguageResponse, TranslationOverviewResponse

from .error_handling import handle_admin_errors

router = APIRouter(prefix="/admin", tags=["translations"])


@router.get("/languages", response_model=list[LanguageResponse])
@handle_admin_errors
async def list_languages(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> list[LanguageResponse]:
    languages = await dashboard_service.list_languages()
    return [LanguageResponse(**lang) for lang in languages]


@router.get("/translations/overview", response_model=TranslationOverviewResponse)
@handle_admin_errors
async def translation_overview(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> TranslationOverviewResponse:
    """Totals, review backlog and languages present for each translatable kind."""
    overview = await dashboard_service.get_translation_overview()
    return TranslationOverviewResponse(**overview)
