from datetime import UTC, datetime, timedelta

from upi_dispatch.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Time provider backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Manually driven clock for tests.

    Not thread-safe. Only advance() moves it, and only forward.
    """

    def __init__(self, start: datetime) -> None:
        if start.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={start.tzinfo}")
        self._current = start

    def now(self) -> datetime:
        return self._current

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by delta and return the new time."""
        if delta < timedelta(0):
            raise ValueError(f"Cannot move clock backwards by {delta}")
        self._current += delta
        return self._current
