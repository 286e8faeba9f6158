"""Domain records returned by the status reporter."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ServiceState(str, Enum):
    """Liveness states a service can report."""

    UP = "UP"


@dataclass(frozen=True)
class ServiceIdentity:
    """Process-constant description of the running service."""

    name: str
    title: str
    description: str
    version: str


@dataclass(frozen=True)
class HealthStatus:
    status: ServiceState
    timestamp: datetime
    service: str
    version: str


@dataclass(frozen=True)
class ServiceInfo:
    application: str
    description: str
    version: str
