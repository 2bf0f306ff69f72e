"""
Health check API endpoints.
"""
from fastapi import APIRouter, status

from app.models.schemas.common import HealthStatus


router = APIRouter()

HEALTH_STATUS = HealthStatus(status="ok", svc="user")


@router.get(
    "",
    response_model=HealthStatus,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Liveness probe used by the orchestrator and load balancer."
)
async def health_check() -> HealthStatus:
    """
    Report that the service is up.

    Always succeeds while the listener is running.
    """
    return HEALTH_STATUS
