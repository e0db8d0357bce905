"""Tests for the clock abstraction behind Date.today."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from diem import Date
from diem.clock import Clock, FixedClock, SystemClock, get_clock, set_clock, use_clock


class TestSystemClock:
    """Tests for the wall-clock source."""

    def test_is_a_clock(self) -> None:
        """SystemClock satisfies the Clock protocol."""
        assert isinstance(SystemClock(), Clock)

    def test_now_is_aware(self) -> None:
        """now() carries the local offset."""
        assert SystemClock().now().tzinfo is not None

    @freeze_time("2024-01-15 12:00:00")
    def test_today_under_frozen_time(self) -> None:
        """Date.today() follows the frozen wall clock."""
        assert Date.today() == Date(2024, 1, 15)
        assert Date.today(SystemClock()) == Date(2024, 1, 15)

    def test_today_follows_ticking_time(self) -> None:
        """The default clock reads the wall clock on every call."""
        with freeze_time("2023-12-31 12:00:00") as frozen:
            assert Date.today() == Date(2023, 12, 31)
            frozen.tick(timedelta(days=1))
            assert Date.today() == Date(2024, 1, 1)

    def test_repr(self) -> None:
        """repr names the class."""
        assert repr(SystemClock()) == "SystemClock()"


class TestFixedClock:
    """Tests for the pinned clock."""

    def test_returns_instant(self, fixed_clock: FixedClock) -> None:
        """now() returns the same instant every time."""
        assert fixed_clock.now() == fixed_clock.now()
        assert fixed_clock.now() == datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    def test_naive_instant_is_utc(self) -> None:
        """A naive instant is taken to be UTC."""
        clock = FixedClock(datetime(2021, 1, 4))
        assert clock.now().tzinfo is timezone.utc

    def test_today_uses_instant_zone(self) -> None:
        """The civil date is read in the instant's own zone."""
        tokyo = timezone(timedelta(hours=9))
        clock = FixedClock(datetime(2024, 1, 15, 23, 30, tzinfo=timezone.utc).astimezone(tokyo))
        assert Date.today(clock) == Date(2024, 1, 16)

    def test_repr(self) -> None:
        """repr shows the instant."""
        assert repr(FixedClock(datetime(2021, 1, 4))).startswith("FixedClock(datetime.datetime(2021")


class TestDefaultClock:
    """Tests for the process-wide default clock."""

    def test_default_is_system_clock(self) -> None:
        """The library starts out on the wall clock."""
        assert isinstance(get_clock(), SystemClock)

    def test_set_clock_returns_previous(self, fixed_clock: FixedClock) -> None:
        """set_clock installs a clock and hands back the old one."""
        previous = set_clock(fixed_clock)
        assert get_clock() is fixed_clock
        assert Date.today() == Date(2024, 1, 15)
        assert set_clock(previous) is fixed_clock

    def test_set_clock_rejects_non_clock(self) -> None:
        """Objects without now() are refused."""
        with pytest.raises(TypeError, match="expected a Clock"):
            set_clock(object())  # type: ignore[arg-type]

    def test_use_clock_restores(self, fixed_clock: FixedClock) -> None:
        """use_clock puts the previous clock back on exit."""
        before = get_clock()
        with use_clock(fixed_clock) as clock:
            assert clock is fixed_clock
            assert Date.today() == Date(2024, 1, 15)
        assert get_clock() is before

    def test_use_clock_restores_on_error(self, fixed_clock: FixedClock) -> None:
        """use_clock restores even when the block raises."""
        before = get_clock()
        with pytest.raises(RuntimeError):
            with use_clock(fixed_clock):
                raise RuntimeError("boom")
        assert get_clock() is before

    def test_explicit_clock_wins(self, fixed_clock: FixedClock) -> None:
        """A clock passed to today() overrides the default."""
        other = FixedClock(datetime(1999, 12, 31, tzinfo=timezone.utc))
        with use_clock(fixed_clock):
            assert Date.today(other) == Date(1999, 12, 31)

    def test_duck_typed_clock(self) -> None:
        """Any object with now() is accepted."""

        class Midnight:
            def now(self) -> datetime:
                return datetime(2000, 1, 1, tzinfo=timezone.utc)

        with use_clock(Midnight()):
            assert Date.today() == Date(2000, 1, 1)

    def test_swap_is_logged(self, fixed_clock: FixedClock, log_records: list[dict]) -> None:
        """Replacing the default clock emits a debug record."""
        set_clock(fixed_clock)

        messages = [r["message"] for r in log_records]
        assert "Default clock replaced" in messages
