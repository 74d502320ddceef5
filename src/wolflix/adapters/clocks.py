"""Clocks for Wolflix."""

from datetime import datetime, timedelta, timezone

from wolflix.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Wall clock returning the current time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock(Clock):
    """A clock that only moves when told to.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, start: datetime | None = None) -> None:
        if start is None:
            start = datetime(2000, 1, 1, tzinfo=timezone.utc)
        if start.tzinfo is None:
            raise ValueError("FrozenClock requires a timezone-aware datetime")
        self._now = start

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by ``delta``."""
        if delta < timedelta(0):
            raise ValueError("FrozenClock cannot move backwards")
        self._now += delta
