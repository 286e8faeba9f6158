"""Status reporter interface definitions."""

from abc import ABC, abstractmethod

from app.core.status.models.status import HealthStatus, ServiceInfo


class IStatusReporter(ABC):
    """Interface for components answering liveness and info queries."""

    @abstractmethod
    def get_health(self) -> HealthStatus:
        """Return the liveness status stamped with the current time."""
        raise NotImplementedError

    @abstractmethod
    def get_info(self) -> ServiceInfo:
        """Return the static description of this service."""
        raise NotImplementedError
