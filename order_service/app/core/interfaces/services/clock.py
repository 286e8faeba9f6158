"""Clock interface definitions."""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Interface for sources of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time."""
        raise NotImplementedError
