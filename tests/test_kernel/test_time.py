"""
Tests for clock providers and millisecond conversions
"""

import time
from datetime import datetime, timezone

from betterguid.kernel.time import (
    RealClock,
    TestClock,
    datetime_to_ms,
    default_clock,
    ms_to_datetime,
)


class TestRealClock:
    """Tests for the system clock"""

    def test_returns_int_milliseconds(self) -> None:
        now = RealClock().now_ms()
        assert isinstance(now, int)
        # Should be after 2020-01-01 in milliseconds
        assert now > 1_577_836_800_000

    def test_tracks_wall_clock(self) -> None:
        before = int(time.time() * 1000)
        now = RealClock().now_ms()
        after = int(time.time() * 1000)
        assert before - 1 <= now <= after + 1

    def test_default_clock_is_real(self) -> None:
        assert isinstance(default_clock, RealClock)


class TestTestClock:
    """Tests for the controllable clock"""

    def test_defaults_to_epoch(self) -> None:
        assert TestClock().now_ms() == 0

    def test_frozen_until_changed(self) -> None:
        clock = TestClock(1000)
        assert clock.now_ms() == 1000
        assert clock.now_ms() == 1000

    def test_set_and_advance(self) -> None:
        clock = TestClock()
        clock.set_ms(5000)
        clock.advance_ms()
        clock.advance_ms(9)
        assert clock.now_ms() == 5010

    def test_set_datetime(self) -> None:
        clock = TestClock()
        clock.set_datetime(datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc))
        assert clock.now_ms() == 1_736_942_400_000


class TestConversions:
    """Tests for datetime <-> millisecond conversions"""

    def test_epoch(self) -> None:
        assert ms_to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert datetime_to_ms(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_keeps_milliseconds_exact(self) -> None:
        dt = ms_to_datetime(1_736_942_400_123)
        assert dt == datetime(2025, 1, 15, 12, 0, 0, 123_000, tzinfo=timezone.utc)
        assert datetime_to_ms(dt) == 1_736_942_400_123

    def test_result_is_utc(self) -> None:
        assert ms_to_datetime(1).tzinfo == timezone.utc
