"""Concrete clock implementations."""

from datetime import datetime

from app.core.interfaces.services.clock import IClock


class SystemClock(IClock):
    """Clock backed by the local wall-clock time."""

    def now(self) -> datetime:
        """Return the local time without a UTC offset."""
        return datetime.now()
