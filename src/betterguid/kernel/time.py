"""
Clock abstraction for deterministic testing

Generators read "now" through a Clock so tests can freeze, set and advance
time in whole milliseconds instead of sleeping.

Fun fact: time.time_ns() was added in Python 3.7 because a float can no longer
represent the current epoch time with nanosecond precision - it has been
off by a few hundred nanoseconds since around 1970 + 104 days!
"""

import time
from datetime import datetime, timedelta, timezone
from typing import Protocol

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Clock(Protocol):
    """Protocol for clocks - allows deterministic testing"""

    def now_ms(self) -> int:
        """Return milliseconds since the Unix epoch (UTC)"""
        ...


class RealClock:
    """Production clock using the system wall clock"""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class TestClock:
    """
    Controllable clock for deterministic tests

    Allows tests to freeze time, set it to a specific millisecond and
    advance it, so collision handling can be exercised on purpose.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, initial_ms: int = 0) -> None:
        """
        Initialize with optional fixed time

        Args:
            initial_ms: Starting time in epoch milliseconds (defaults to the epoch)
        """
        self._current_ms = initial_ms

    def now_ms(self) -> int:
        """Return current test time"""
        return self._current_ms

    def set_ms(self, timestamp_ms: int) -> None:
        """Set current time to a specific millisecond"""
        self._current_ms = timestamp_ms

    def set_datetime(self, dt: datetime) -> None:
        """Set current time from an aware datetime"""
        self._current_ms = datetime_to_ms(dt)

    def advance_ms(self, milliseconds: int = 1) -> None:
        """Advance time by the given number of milliseconds"""
        self._current_ms += milliseconds


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime"""
    return EPOCH + timedelta(milliseconds=timestamp_ms)


def datetime_to_ms(dt: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds"""
    delta = dt - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


# Global default clock
default_clock: Clock = RealClock()
