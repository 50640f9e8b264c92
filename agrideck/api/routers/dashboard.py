"""
Dashboard API endpoints.

Routes: GET /admin/dashboard

Dependencies: agrideck.application.services
System role: Admin home statistics HTTP API
"""

from fastapi import APIRouter, Depends

from agrideck.api.deps.dependencies import get_dashboard_service
from agrideck.application.services import DashboardService
from agrideck.models.dashboard import DashboardStatsResponse

from .error_handling import handle_admin_errors

router = APIRouter(prefix="/admin/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStatsResponse)
@handle_admin_errors
async def get_dashboard_stats(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    return DashboardStatsResponse(**await dashboard_service.get_stats())
