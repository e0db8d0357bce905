"""Tests for strftime-style formatting and parsing."""

from __future__ import annotations

import pytest

from diem import Date, ParseError
from diem.format import strftime, strptime


class TestStrftime:
    """Tests for strftime formatting."""

    def test_basic_directives(self) -> None:
        """Test year, month and day directives."""
        assert strftime(Date(2024, 1, 15), "%Y-%m-%d") == "2024-01-15"

    def test_names(self) -> None:
        """Test month and weekday names."""
        d = Date(2024, 1, 15)
        assert strftime(d, "%a %d %B %Y") == "Mon 15 January 2024"
        assert strftime(d, "%A, %b %d") == "Monday, Jan 15"

    def test_two_digit_year(self) -> None:
        """Test %y."""
        assert strftime(Date(2005, 6, 1), "%y") == "05"

    def test_space_padded_day(self) -> None:
        """Test %e."""
        assert strftime(Date(2024, 3, 5), "[%e]") == "[ 5]"

    def test_year_day(self) -> None:
        """Test %j."""
        assert strftime(Date(2024, 1, 1), "%j") == "001"
        assert strftime(Date(2024, 12, 31), "%j") == "366"

    def test_iso_week_directives(self) -> None:
        """Test %G, %V and %u around a year boundary."""
        assert strftime(Date(2021, 1, 1), "%G-W%V-%u") == "2020-W53-5"
        assert strftime(Date(2024, 12, 30), "%G-W%V-%u") == "2025-W01-1"

    def test_sunday_is_seven(self) -> None:
        """Test %u for Sunday."""
        assert strftime(Date(2024, 1, 14), "%u") == "7"

    def test_negative_year(self) -> None:
        """Test %Y before year 1."""
        assert strftime(Date(-44, 3, 15), "%Y") == "-0044"

    def test_literal_percent(self) -> None:
        """Test %% and a trailing lone %."""
        assert strftime(Date(2024, 1, 1), "%%Y") == "%Y"
        assert strftime(Date(2024, 1, 1), "100%") == "100%"

    def test_unsupported_directive_copied(self) -> None:
        """Test that time directives pass through unchanged."""
        assert strftime(Date(2024, 1, 1), "%Y %H:%M") == "2024 %H:%M"

    def test_date_method(self) -> None:
        """Test Date.strftime delegates here."""
        assert Date(2024, 7, 4).strftime("%d.%m.%Y") == "04.07.2024"

    def test_matches_stdlib_for_common_directives(self) -> None:
        """Test agreement with datetime.date.strftime in the C locale range."""
        import datetime

        fmt = "%Y %m %d %j %u %V %G"
        for args in [(2024, 1, 15), (2021, 1, 3), (2020, 12, 31), (1999, 2, 28)]:
            assert strftime(Date(*args), fmt) == datetime.date(*args).strftime(fmt)


class TestStrptime:
    """Tests for strptime parsing."""

    def test_basic(self) -> None:
        """Test a day/month/year format."""
        assert strptime("15/01/2024", "%d/%m/%Y") == Date(2024, 1, 15)

    def test_names(self) -> None:
        """Test month and weekday names, ignoring case."""
        assert strptime("Mon, 15 Jan 2024", "%a, %d %b %Y") == Date(2024, 1, 15)
        assert strptime("monday 15 JANUARY 2024", "%A %d %B %Y") == Date(2024, 1, 15)

    def test_space_padded_day(self) -> None:
        """Test %e with and without the pad."""
        assert strptime(" 5 March 2024", "%e %B %Y") == Date(2024, 3, 5)
        assert strptime("5 March 2024", "%e %B %Y") == Date(2024, 3, 5)

    def test_two_digit_year(self) -> None:
        """Test the %y pivot."""
        assert strptime("01/02/69", "%m/%d/%y") == Date(1969, 1, 2)
        assert strptime("01/02/68", "%m/%d/%y") == Date(2068, 1, 2)

    def test_year_day(self) -> None:
        """Test %j alone and together with month and day."""
        assert strptime("2024-060", "%Y-%j") == Date(2024, 2, 29)
        assert strptime("2024-03-01 061", "%Y-%m-%d %j") == Date(2024, 3, 1)

    def test_year_day_mismatch(self) -> None:
        """Test %j that disagrees with the month and day."""
        with pytest.raises(ParseError, match="day-of-year does not match date"):
            strptime("2024-03-02 061", "%Y-%m-%d %j")

    def test_year_day_out_of_range(self) -> None:
        """Test day 366 in a common year."""
        with pytest.raises(ParseError, match="day-of-year out of range"):
            strptime("2023-366", "%Y-%j")

    def test_defaults(self) -> None:
        """Test missing fields."""
        assert strptime("03/15", "%m/%d") == Date(1, 3, 15)
        assert strptime("2024", "%Y") == Date(2024, 1, 1)

    def test_signed_year(self) -> None:
        """Test a negative year."""
        assert strptime("-0044-03-15", "%Y-%m-%d") == Date(-44, 3, 15)

    def test_no_match(self) -> None:
        """Test input that does not fit the format."""
        with pytest.raises(ParseError) as exc_info:
            strptime("2024-060", "%Y-%m-%d")
        assert exc_info.value.layout == "%Y-%m-%d"
        assert exc_info.value.value == "2024-060"

    def test_month_out_of_range(self) -> None:
        """Test month 13."""
        with pytest.raises(ParseError) as exc_info:
            strptime("2024-13-01", "%Y-%m-%d")
        assert str(exc_info.value) == 'parsing date "2024-13-01": month out of range'

    def test_day_out_of_range(self) -> None:
        """Test Feb 29 in a common year."""
        with pytest.raises(ParseError, match="day out of range"):
            strptime("2023-02-29", "%Y-%m-%d")

    def test_unsupported_directive(self) -> None:
        """Test that format-only and time directives are rejected."""
        with pytest.raises(ValueError, match="unsupported strptime directive"):
            strptime("2024 01", "%G %V")

    def test_repeated_directive(self) -> None:
        """Test a format that captures the same field twice."""
        with pytest.raises(ValueError, match="repeated strptime directive: %Y"):
            strptime("2024 2024", "%Y %Y")
        with pytest.raises(ValueError, match="repeated"):
            Date.strptime("2024 2024", "%Y %Y")

    def test_repeated_weekday_name_allowed(self) -> None:
        """Test that non-capturing directives may repeat."""
        assert strptime("Mon Mon 2024-01-15", "%a %a %Y-%m-%d") == Date(2024, 1, 15)

    @pytest.mark.parametrize("value", ["2024-01-15\n", "2024-01-15 ", "2024-01-15x"])
    def test_trailing_text(self, value: str) -> None:
        """Test that nothing may follow the date."""
        with pytest.raises(ParseError):
            Date.strptime(value, "%Y-%m-%d")

    @pytest.mark.parametrize("value", ["٢٠٢٤-01-15", "2024-０１-15"])
    def test_non_ascii_digits(self, value: str) -> None:
        """Test that only ASCII digits are read as numbers."""
        with pytest.raises(ParseError):
            Date.strptime(value, "%Y-%m-%d")

    def test_range_failure_is_logged(self, log_records: list[dict]) -> None:
        """Test out-of-range fields emit a debug record."""
        with pytest.raises(ParseError):
            strptime("2024-13-01", "%Y-%m-%d")

        records = [r for r in log_records if r["message"] == "Date field out of range"]
        assert [r["extra"]["field"] for r in records] == ["month"]

    def test_date_classmethod(self) -> None:
        """Test Date.strptime delegates here."""
        assert Date.strptime("04.07.2024", "%d.%m.%Y") == Date(2024, 7, 4)

    def test_format_then_parse(self) -> None:
        """Test strftime output parses back."""
        fmt = "%A %e %B %Y"
        for d in [Date(2024, 1, 15), Date(1999, 12, 31), Date(2000, 2, 29)]:
            assert strptime(strftime(d, fmt), fmt) == d
