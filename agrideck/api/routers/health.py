"""
Health check API endpoints.

Routes: GET /health, GET /health/gemini

Dependencies: agrideck.core.gemini
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from agrideck.api.deps.dependencies import get_gemini_gateway
from agrideck.core.gemini import GeminiGateway


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/gemini", response_model=HealthResponse)
async def health_check_gemini(
    gateway: GeminiGateway = Depends(get_gemini_gateway),
) -> HealthResponse:
    """Report whether a Gemini API key is configured."""
    if gateway.is_configured:
        return HealthResponse(status="healthy", message="Gemini API configured")
    return HealthResponse(status="degraded", message="Gemini API is not configured")
