"""System clock adapter."""
from datetime import datetime, timezone

from core.application.ports.clock import Clock


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def timestamp(self) -> float:
        return self.now().timestamp()


class FixedClock(Clock):
    """Clock pinned to a single instant (for tests and demos)."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def timestamp(self) -> float:
        return self._instant.timestamp()
