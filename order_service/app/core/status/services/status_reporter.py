"""Concrete status reporter implementation."""

from app.core.interfaces.services.clock import IClock
from app.core.interfaces.services.status_reporter import IStatusReporter
from app.core.status.models.status import (
    HealthStatus,
    ServiceIdentity,
    ServiceInfo,
    ServiceState,
)


class StatusReporter(IStatusReporter):
    """Reports liveness and identity of the service.

    The identity is fixed at construction time, so `get_info` always returns
    the same record. Only the health timestamp varies between calls, and it is
    read from the injected clock.
    """

    def __init__(self, identity: ServiceIdentity, clock: IClock) -> None:
        self.identity = identity
        self.clock = clock
        self._info = ServiceInfo(
            application=identity.title,
            description=identity.description,
            version=identity.version,
        )

    def get_health(self) -> HealthStatus:
        """Return the UP status stamped with the clock's current time."""
        return HealthStatus(
            status=ServiceState.UP,
            timestamp=self.clock.now(),
            service=self.identity.name,
            version=self.identity.version,
        )

    def get_info(self) -> ServiceInfo:
        """Return the info record built at construction time."""
        return self._info
