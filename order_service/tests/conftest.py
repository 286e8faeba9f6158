"""Shared fixtures for the order service tests."""

from datetime import datetime, timedelta
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.interfaces.services.clock import IClock
from app.core.interfaces.services.status_reporter import IStatusReporter
from app.entrypoints.api.setup import create_app
from app.setup.status_reporter import get_service_identity, get_status_reporter
from app.core.status.services.status_reporter import StatusReporter

FIXED_NOW = datetime(2025, 9, 20, 12, 34, 56, 789012)


class SteppingClock(IClock):
    """Clock that starts at a fixed instant and advances on every read."""

    def __init__(self, start: datetime, step: timedelta = timedelta(0)) -> None:
        self.current = start
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


class BrokenReporter(IStatusReporter):
    """Reporter whose every query fails."""

    def get_health(self):
        raise RuntimeError("clock unavailable")

    def get_info(self):
        raise RuntimeError("identity unavailable")


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def stepping_clock():
    """Factory for clocks starting at the fixed instant."""

    def _make(step: timedelta = timedelta(0)) -> SteppingClock:
        return SteppingClock(FIXED_NOW, step=step)

    return _make


@pytest.fixture
def use_clock(app: FastAPI):
    """Route the status endpoints through a reporter reading the given clock."""

    def _use(clock: IClock) -> StatusReporter:
        reporter = StatusReporter(identity=get_service_identity(), clock=clock)
        app.dependency_overrides[get_status_reporter] = lambda: reporter
        return reporter

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(app: FastAPI) -> Iterator[TestClient]:
    """Client for an app whose status reporter raises on every query."""

    app.dependency_overrides[get_status_reporter] = BrokenReporter
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
