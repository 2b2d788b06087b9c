"""Health Probe — liveness of the API and its document store connection.

Invariants:
    - GET /api/healthz returns 200 with a static message when the store answers
    - Store failure returns 500 with "Application failed to reach database: ..."
"""

from fastapi import APIRouter, Depends

from helium.api.dependencies import get_health_service
from helium.services.health_service import HealthService

router = APIRouter(prefix="/api/healthz", tags=["system"])


@router.get("")
async def health_check(service: HealthService = Depends(get_health_service)) -> dict:
    """Tells external services if the service is running."""
    return {"message": await service.check()}
