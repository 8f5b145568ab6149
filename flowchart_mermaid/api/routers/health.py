"""
Health check API endpoints.

Routes: GET /health, GET /health/providers

Dependencies: flowchart_mermaid.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends

from flowchart_mermaid.api.deps import get_settings_dependency
from flowchart_mermaid.configs import Settings
from flowchart_mermaid.models.common import HealthResponse, ProviderStatusResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/providers", response_model=ProviderStatusResponse)
async def health_check_providers(
    settings: Settings = Depends(get_settings_dependency),
) -> ProviderStatusResponse:
    """Report which process-wide provider keys are configured."""
    return ProviderStatusResponse(
        openai=bool(settings.openai.api_key),
        gemini=bool(settings.gemini.api_key),
        ai_edit=bool(settings.openai.api_key),
    )
