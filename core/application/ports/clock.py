"""Clock port."""
from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """
    Source of the current time.

    Injected into use cases so tests can pin timestamps.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware datetime."""
        pass

    @abstractmethod
    def timestamp(self) -> float:
        """Current POSIX timestamp in seconds."""
        pass
