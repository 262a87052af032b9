"""
==============================================================================
Health Check Endpoints
==============================================================================

Serving status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends, Response, status

from catalog_service.core.dependencies import get_health_reporter
from catalog_service.schemas import HealthResponse
from catalog_service.services import HealthReporter, ServingStatus


router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    response: Response,
    reporter: HealthReporter = Depends(get_health_reporter)
):
    """
    Health check endpoint.

    Returns SERVING (200) once the catalog is loaded, NOT_SERVING (503)
    otherwise.
    """
    serving_status = reporter.check()
    if serving_status is not ServingStatus.SERVING:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status=serving_status)


@router.get("/ready")
async def readiness_check(reporter: HealthReporter = Depends(get_health_reporter)):
    """Readiness probe for container orchestration."""
    return {"ready": reporter.check() is ServingStatus.SERVING}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
