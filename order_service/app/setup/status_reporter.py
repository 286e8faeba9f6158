"""This file contains the status reporter dependencies."""

from functools import lru_cache

from app.core.interfaces.services.clock import IClock
from app.core.interfaces.services.status_reporter import IStatusReporter
from app.core.status.models.status import ServiceIdentity
from app.core.status.services.clock import SystemClock
from app.core.status.services.status_reporter import StatusReporter
from app.settings import settings


def get_service_identity() -> ServiceIdentity:
    """Build the service identity from the application settings."""
    return ServiceIdentity(
        name=settings.application_name,
        title=settings.application_title,
        description=settings.application_description,
        version=settings.application_version,
    )


@lru_cache(maxsize=1)
def get_clock() -> IClock:
    """Provide the process clock for dependency injection."""
    return SystemClock()


@lru_cache(maxsize=1)
def get_status_reporter() -> IStatusReporter:
    """Provide the process status reporter for dependency injection."""
    return StatusReporter(identity=get_service_identity(), clock=get_clock())
