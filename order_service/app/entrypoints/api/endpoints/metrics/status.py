"""API endpoints for health and info checks."""

from fastapi import APIRouter, Depends

from app.core.interfaces.services.status_reporter import IStatusReporter
from app.entrypoints.api.schemas.status import (
    HealthStatusResponse,
    ServiceInfoResponse,
)
from app.setup.status_reporter import get_status_reporter

router = APIRouter(tags=["Status"])


@router.get(
    "/health",
    summary="API health check.",
    response_model=HealthStatusResponse,
)
async def health_check(
    reporter: IStatusReporter = Depends(get_status_reporter),
) -> HealthStatusResponse:
    """Returns the health status of the service."""

    return HealthStatusResponse.from_domain(reporter.get_health())


@router.get(
    "/info",
    summary="Service information.",
    response_model=ServiceInfoResponse,
)
async def service_info(
    reporter: IStatusReporter = Depends(get_status_reporter),
) -> ServiceInfoResponse:
    """Returns the static description of the service."""

    return ServiceInfoResponse.from_domain(reporter.get_info())
