"""Tests for the Weekday and Month enumerations."""

from __future__ import annotations

import pytest

from diem import Month, Weekday


class TestWeekday:
    """Tests for Weekday."""

    def test_iso_numbering(self) -> None:
        """Monday is 1 and Sunday is 7."""
        assert Weekday.MONDAY == 1
        assert Weekday.SUNDAY == 7
        assert [int(w) for w in Weekday] == [1, 2, 3, 4, 5, 6, 7]

    def test_from_int(self) -> None:
        """Members can be looked up by number."""
        assert Weekday(3) is Weekday.WEDNESDAY

    @pytest.mark.parametrize("value", [0, 8])
    def test_invalid(self, value: int) -> None:
        """Out-of-range numbers are rejected."""
        with pytest.raises(ValueError):
            Weekday(value)

    def test_str_is_english_name(self) -> None:
        """str gives the full English name."""
        assert str(Weekday.MONDAY) == "Monday"
        assert str(Weekday.SUNDAY) == "Sunday"

    def test_short_name(self) -> None:
        """short_name gives the three-letter abbreviation."""
        assert [w.short_name for w in Weekday] == [
            "Mon",
            "Tue",
            "Wed",
            "Thu",
            "Fri",
            "Sat",
            "Sun",
        ]

    def test_matches_isoweekday(self) -> None:
        """Values agree with datetime.date.isoweekday()."""
        import datetime

        for offset in range(7):
            d = datetime.date(2024, 1, 14) + datetime.timedelta(days=offset)
            assert Weekday(d.isoweekday()).short_name == d.strftime("%a")


class TestMonth:
    """Tests for Month."""

    def test_numbering(self) -> None:
        """January is 1 and December is 12."""
        assert Month.JANUARY == 1
        assert Month.DECEMBER == 12
        assert len(Month) == 12

    @pytest.mark.parametrize("value", [0, 13])
    def test_invalid(self, value: int) -> None:
        """Out-of-range numbers are rejected."""
        with pytest.raises(ValueError):
            Month(value)

    def test_str_is_english_name(self) -> None:
        """str gives the full English name."""
        assert str(Month.SEPTEMBER) == "September"

    def test_short_name(self) -> None:
        """short_name gives the three-letter abbreviation."""
        assert Month.SEPTEMBER.short_name == "Sep"
        assert Month.MAY.short_name == "May"

    def test_int_arithmetic(self) -> None:
        """Members behave as integers."""
        assert Month.MARCH + 1 == 4
        assert Month.DECEMBER > Month.JANUARY
