"""
User API endpoints.

Routes:
- GET /admin/users/{id} - User detail with assigned markets
- GET /admin/users/{id}/available-mandis - Markets in the user's state
- POST /admin/users/{id}/mandis - Assign a market
- DELETE /admin/users/{id}/mandis/{mandi_id} - Remove a market

Dependencies: agrideck.application.services, agrideck.models.users
System role: User management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from agrideck.api.deps.dependencies import get_user_service
from agrideck.application.services import UserService
from agrideck.models.users import AssignMandiRequest, MandiSummary, UserDetailResponse

from .error_handling import handle_admin_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["users"])


@router.get("/{user_id}", response_model=UserDetailResponse)
@handle_admin_errors
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """
    Get user detail.

    Raises:
        HTTPException(404): User not found
    """
    return UserDetailResponse(**await user_service.get_user_detail(user_id))


@router.get("/{user_id}/available-mandis", response_model=list[MandiSummary])
@handle_admin_errors
async def list_available_mandis(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> list[MandiSummary]:
    """
    Markets the user can still be assigned.

    Raises:
        HTTPException(400): User has no state
        HTTPException(404): User not found
    """
    mandis = await user_service.get_available_mandis(user_id)
    return [MandiSummary(**m) for m in mandis]


@router.post("/{user_id}/mandis", status_code=201)
@handle_admin_errors
async def assign_mandi(
    user_id: UUID,
    request: AssignMandiRequest,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """
    Assign a market to the user.

    Raises:
        HTTPException(404): User not found
        HTTPException(409): Market already assigned
    """
    await user_service.assign_mandi(user_id, request.mandi_id)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/{user_id}/mandis/{mandi_id}", status_code=204)
@handle_admin_errors
async def remove_mandi(
    user_id: UUID,
    mandi_id: int,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    await user_service.remove_mandi(user_id, mandi_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
