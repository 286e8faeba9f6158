"""Pydantic models for status-related API responses."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.core.status.models.status import HealthStatus, ServiceInfo, ServiceState


class HealthStatusResponse(BaseModel):
    """API response model for the health API endpoint."""

    status: ServiceState = Field(
        description="The status of the service.",
        examples=["UP"],
    )
    timestamp: datetime = Field(
        description="The local date and time the request was handled.",
        examples=["2025-09-20T12:34:56.789012"],
    )
    service: str = Field(
        description="The service identifier.",
        examples=["order-service"],
    )
    version: str = Field(
        description="The service version.",
        examples=["1.0.0"],
    )

    @classmethod
    def from_domain(cls, health: HealthStatus) -> "HealthStatusResponse":
        return cls(
            status=health.status,
            timestamp=health.timestamp,
            service=health.service,
            version=health.version,
        )


class ServiceInfoResponse(BaseModel):
    """API response model for the info API endpoint."""

    application: str = Field(
        description="The human readable application name.",
        examples=["Order Service"],
    )
    description: str = Field(
        description="What the application does.",
        examples=["Microservice for order management"],
    )
    version: str = Field(
        description="The service version.",
        examples=["1.0.0"],
    )

    @classmethod
    def from_domain(cls, info: ServiceInfo) -> "ServiceInfoResponse":
        return cls(
            application=info.application,
            description=info.description,
            version=info.version,
        )


class ActuatorHealthResponse(BaseModel):
    """API response model for the actuator health probe."""

    status: ServiceState = Field(
        description="The status of the service.",
        examples=["UP"],
    )

    @classmethod
    def from_domain(cls, health: HealthStatus) -> "ActuatorHealthResponse":
        return cls(status=health.status)
