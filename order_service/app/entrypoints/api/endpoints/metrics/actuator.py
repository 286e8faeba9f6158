"""Actuator-style probe endpoints for infrastructure health checks."""

from fastapi import APIRouter, Depends

from app.core.interfaces.services.status_reporter import IStatusReporter
from app.entrypoints.api.schemas.status import (
    ActuatorHealthResponse,
    ServiceInfoResponse,
)
from app.setup.status_reporter import get_status_reporter

router = APIRouter(tags=["Actuator"])


@router.get(
    "/health",
    summary="Actuator health probe.",
    response_model=ActuatorHealthResponse,
)
async def actuator_health(
    reporter: IStatusReporter = Depends(get_status_reporter),
) -> ActuatorHealthResponse:
    """Returns the bare liveness status of the service."""

    return ActuatorHealthResponse.from_domain(reporter.get_health())


@router.get(
    "/info",
    summary="Actuator info probe.",
    response_model=ServiceInfoResponse,
)
async def actuator_info(
    reporter: IStatusReporter = Depends(get_status_reporter),
) -> ServiceInfoResponse:
    """Returns the static description of the service."""

    return ServiceInfoResponse.from_domain(reporter.get_info())
