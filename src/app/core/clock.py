"""Clock abstraction so date-dependent logic can be pinned in tests."""
from abc import ABC, abstractmethod
from datetime import datetime, UTC


class Clock(ABC):
    """Supplies the current UTC instant."""

    @abstractmethod
    def now(self) -> datetime:
        pass


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock(Clock):
    """Always returns the same instant. Naive datetimes are taken to be UTC."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
