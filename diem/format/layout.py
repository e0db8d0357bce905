"""Reference-pattern layout formatting and parsing.

A layout is written as the reference date itself,

    Mon Jan 2 15:04:05 MST 2006

so each field of the reference marks where, and in which style, the
corresponding field of a date appears. Only date fields carry information
for a Date; time-of-day and zone tokens are accepted so that full
timestamp layouts still work, but they format as UTC midnight and are
validated then discarded when parsing.

Recognized tokens:
    2006 06              year (4-digit, 2-digit); years outside 0-9999
                         carry a sign, as in "-0044" or "+10000"
    January Jan 01 1     month (long, short, zero-padded, plain)
    Monday Mon           weekday (long, short)
    02 _2 2              day of month (zero-, space-padded, plain)
    002 __2              day of year (zero-, space-padded)
    15 03 3 04 4 05 5    hour, 12-hour, minute, second
    PM pm                meridiem
    MST                  zone abbreviation
    Z07:00:00 Z070000 Z07:00 Z0700 Z07      ISO 8601 zone ("Z" for UTC)
    -07:00:00 -070000 -07:00 -0700 -07      numeric zone
    .000 ,000 .999 ,999  fractional second (fixed, optional)

Any other text is copied literally when formatting and must match
literally when parsing, except that a run of spaces in the layout
matches any run of spaces in the value.

Examples:
    >>> format_ymd(2006, 1, 2, "Mon Jan _2 2006")
    'Mon Jan  2 2006'
    >>> parse_ymd("02 Jan 06", "15 Mar 21")
    (2021, 3, 15)
"""

from __future__ import annotations

from loguru import logger

from diem._internal.calendar import (
    days_in_month,
    days_in_year,
    ordinal_to_weekday,
    ordinal_to_year_day,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from diem._internal.constants import (
    LONG_DAY_NAMES,
    LONG_MONTH_NAMES,
    SHORT_DAY_NAMES,
    SHORT_MONTH_NAMES,
)
from diem.errors import ParseError, quote

# Longest first, so "-0700" is never read as "-07" followed by "00"
_ZONE_TOKENS: dict[str, tuple[str, ...]] = {
    "-": ("-070000", "-07:00:00", "-0700", "-07:00", "-07"),
    "Z": ("Z070000", "Z07:00:00", "Z0700", "Z07:00", "Z07"),
}

# Zone tokens rendered for the fixed UTC anchor
_UTC_ZONE_TEXT: dict[str, str] = {
    "-070000": "+000000",
    "-07:00:00": "+00:00:00",
    "-0700": "+0000",
    "-07:00": "+00:00",
    "-07": "+00",
}

# Time-of-day tokens rendered for midnight
_MIDNIGHT_TEXT: dict[str, str] = {
    "15": "00",
    "3": "12",
    "03": "12",
    "4": "0",
    "04": "00",
    "5": "0",
    "05": "00",
    "PM": "AM",
    "pm": "am",
    "MST": "UTC",
}


def _starts_with_lower(s: str) -> bool:
    return bool(s) and "a" <= s[0] <= "z"


def _is_digit(s: str, i: int) -> bool:
    return i < len(s) and "0" <= s[i] <= "9"


def _is_fraction(token: str) -> bool:
    return len(token) >= 2 and token[0] in ".," and token[1] in "09"


def next_chunk(layout: str) -> tuple[str, str, str]:
    """Split layout at its first token.

    Returns:
        A (prefix, token, suffix) triple. The prefix is literal text;
        token is "" when the layout contains no further tokens.

    Examples:
        >>> next_chunk("2006-01-02")
        ('', '2006', '-01-02')
        >>> next_chunk("Date: Jan")
        ('Date: ', 'Jan', '')
        >>> next_chunk("Janet")
        ('Janet', '', '')
    """
    n = len(layout)
    i = 0
    while i < n:
        c = layout[i]
        rest = layout[i:]

        if c == "J":
            if rest.startswith("January"):
                return layout[:i], "January", layout[i + 7 :]
            if rest.startswith("Jan") and not _starts_with_lower(layout[i + 3 :]):
                return layout[:i], "Jan", layout[i + 3 :]

        elif c == "M":
            if rest.startswith("Monday"):
                return layout[:i], "Monday", layout[i + 6 :]
            if rest.startswith("Mon") and not _starts_with_lower(layout[i + 3 :]):
                return layout[:i], "Mon", layout[i + 3 :]
            if rest.startswith("MST"):
                return layout[:i], "MST", layout[i + 3 :]

        elif c == "0":
            if len(rest) >= 2 and "1" <= rest[1] <= "6":
                return layout[:i], rest[:2], layout[i + 2 :]
            if rest.startswith("002"):
                return layout[:i], "002", layout[i + 3 :]

        elif c == "1":
            if rest.startswith("15"):
                return layout[:i], "15", layout[i + 2 :]
            return layout[:i], "1", layout[i + 1 :]

        elif c == "2":
            if rest.startswith("2006"):
                return layout[:i], "2006", layout[i + 4 :]
            return layout[:i], "2", layout[i + 1 :]

        elif c == "_":
            if rest.startswith("_2"):
                # "_2006" is a literal underscore followed by a year
                if rest.startswith("_2006"):
                    return layout[: i + 1], "2006", layout[i + 5 :]
                return layout[:i], "_2", layout[i + 2 :]
            if rest.startswith("__2"):
                return layout[:i], "__2", layout[i + 3 :]

        elif c in "345":
            return layout[:i], c, layout[i + 1 :]

        elif c == "P":
            if rest.startswith("PM"):
                return layout[:i], "PM", layout[i + 2 :]

        elif c == "p":
            if rest.startswith("pm"):
                return layout[:i], "pm", layout[i + 2 :]

        elif c in _ZONE_TOKENS:
            for token in _ZONE_TOKENS[c]:
                if rest.startswith(token):
                    return layout[:i], token, layout[i + len(token) :]

        elif c in ".,":
            if i + 1 < n and layout[i + 1] in "09":
                ch = layout[i + 1]
                j = i + 1
                while j < n and layout[j] == ch:
                    j += 1
                if not _is_digit(layout, j):
                    return layout[:i], layout[i:j], layout[j:]

        i += 1

    return layout, "", ""


def _pad(value: int, width: int, fill: str = "0") -> str:
    """Render value right-aligned to width, sign first."""
    if value < 0:
        return "-" + str(-value).rjust(width, fill)
    return str(value).rjust(width, fill)


def _format_year(year: int) -> str:
    """Render a 4-digit year, signed when outside 0-9999 (ISO 8601 expanded form)."""
    if year > 9999:
        return "+" + str(year)
    return _pad(year, 4)


def format_ymd(year: int, month: int, day: int, layout: str) -> str:
    """Render a valid calendar day using a reference-pattern layout.

    Formatting never fails: text that is not a token is copied as-is.

    Args:
        year: The year (can be 0 or negative).
        month: The month (1-12).
        day: The day of the month.
        layout: The layout to render with.

    Returns:
        The formatted string.

    Examples:
        >>> format_ymd(2021, 1, 4, "Monday, 02-Jan-06")
        'Monday, 04-Jan-21'
        >>> format_ymd(2021, 1, 4, "2006-01-02T15:04:05Z07:00")
        '2021-01-04T00:00:00Z'
    """
    year, month, day = int(year), int(month), int(day)
    ordinal = ymd_to_ordinal(year, month, day)
    weekday = ordinal_to_weekday(ordinal)
    out: list[str] = []

    while layout:
        prefix, token, suffix = next_chunk(layout)
        out.append(prefix)
        if not token:
            break
        layout = suffix

        if token == "2006":
            out.append(_format_year(year))
        elif token == "06":
            two = abs(year) % 100
            out.append(_pad(-two if year < 0 else two, 2))
        elif token == "January":
            out.append(LONG_MONTH_NAMES[month])
        elif token == "Jan":
            out.append(SHORT_MONTH_NAMES[month])
        elif token == "1":
            out.append(str(month))
        elif token == "01":
            out.append(_pad(month, 2))
        elif token == "Monday":
            out.append(LONG_DAY_NAMES[weekday])
        elif token == "Mon":
            out.append(SHORT_DAY_NAMES[weekday])
        elif token == "2":
            out.append(str(day))
        elif token == "_2":
            out.append(_pad(day, 2, " "))
        elif token == "02":
            out.append(_pad(day, 2))
        elif token == "__2":
            out.append(_pad(ordinal_to_year_day(ordinal), 3, " "))
        elif token == "002":
            out.append(_pad(ordinal_to_year_day(ordinal), 3))
        elif token in _MIDNIGHT_TEXT:
            out.append(_MIDNIGHT_TEXT[token])
        elif token[0] == "Z":
            out.append("Z")
        elif token in _UTC_ZONE_TEXT:
            out.append(_UTC_ZONE_TEXT[token])
        elif _is_fraction(token):
            if token[1] == "0":
                out.append(token[0] + "0" * (len(token) - 1))

    return "".join(out)


def _cut_space(s: str) -> str:
    return s.lstrip(" ")


def _skip(value: str, prefix: str) -> str | None:
    """Consume a literal prefix from value.

    Returns:
        The rest of value, or None if value does not start with prefix.
    """
    while prefix:
        if prefix[0] == " ":
            if value and value[0] != " ":
                return None
            prefix = _cut_space(prefix)
            value = _cut_space(value)
            continue
        if not value or value[0] != prefix[0]:
            return None
        prefix = prefix[1:]
        value = value[1:]
    return value


def _parse_year(value: str) -> tuple[int, str] | None:
    """Read a 4-digit year, or a signed year of 4 or more digits."""
    if value[:1] in ("+", "-"):
        n = 1
        while _is_digit(value, n):
            n += 1
        if n < 5:
            return None
        return int(value[:n]), value[n:]
    if len(value) >= 4 and all(_is_digit(value, i) for i in range(4)):
        return int(value[:4]), value[4:]
    return None


def _getnum(value: str, fixed: bool) -> tuple[int, str] | None:
    """Read a one- or two-digit number; exactly two when fixed."""
    if not _is_digit(value, 0):
        return None
    if not _is_digit(value, 1):
        if fixed:
            return None
        return int(value[0]), value[1:]
    return int(value[:2]), value[2:]


def _getnum3(value: str, fixed: bool) -> tuple[int, str] | None:
    """Read a one- to three-digit number; exactly three when fixed."""
    i = 0
    while i < 3 and _is_digit(value, i):
        i += 1
    if i == 0 or (fixed and i != 3):
        return None
    return int(value[:i]), value[i:]


def _lookup(names: tuple[str, ...], value: str) -> tuple[int, str] | None:
    """Match a name from a 1-indexed table, ignoring case."""
    for index, name in enumerate(names):
        if name and value[: len(name)].lower() == name.lower():
            return index, value[len(name) :]
    return None


def _signed_offset_length(value: str) -> int:
    """Length of a "+hh" style offset at the start of value, or 0."""
    if not value or value[0] not in "+-":
        return 0
    i = 1
    while _is_digit(value, i):
        i += 1
    if i == 1 or int(value[1:i]) > 24:
        return 0
    return i


def _zone_abbrev_length(value: str) -> int:
    """Length of a zone abbreviation ("PST", "CEST", "GMT+1") at the start of value, or 0."""
    if len(value) < 3:
        return 0
    if value[:4] in ("ChST", "MeST"):
        return 4
    if value.startswith("GMT"):
        return 3 + _signed_offset_length(value[3:])
    if value[0] in "+-":
        return _signed_offset_length(value)

    upper = 0
    while upper < 6 and upper < len(value) and "A" <= value[upper] <= "Z":
        upper += 1
    if upper == 3:
        return 3
    if upper == 4 and (value[3] == "T" or value[:4] == "WITA"):
        return 4
    if upper == 5 and value[4] == "T":
        return 5
    return 0


def _parse_zone(token: str, value: str) -> tuple[tuple[int, int, int], str] | None:
    """Read a numeric or ISO 8601 zone offset.

    Returns:
        ((hours, minutes, seconds), rest), or None if malformed. A "Z"
        accepted by an ISO 8601 token reads as a zero offset.
    """
    if token[0] == "Z" and value[:1] == "Z":
        return (0, 0, 0), value[1:]

    if token in ("Z07:00", "-07:00"):
        if len(value) < 6 or value[3] != ":":
            return None
        sign, hh, mm, ss, rest = value[0], value[1:3], value[4:6], "00", value[6:]
    elif token in ("Z07", "-07"):
        if len(value) < 3:
            return None
        sign, hh, mm, ss, rest = value[0], value[1:3], "00", "00", value[3:]
    elif token in ("Z07:00:00", "-07:00:00"):
        if len(value) < 9 or value[3] != ":" or value[6] != ":":
            return None
        sign, hh, mm, ss, rest = value[0], value[1:3], value[4:6], value[7:9], value[9:]
    elif token in ("Z070000", "-070000"):
        if len(value) < 7:
            return None
        sign, hh, mm, ss, rest = value[0], value[1:3], value[3:5], value[5:7], value[7:]
    else:
        if len(value) < 5:
            return None
        sign, hh, mm, ss, rest = value[0], value[1:3], value[3:5], "00", value[5:]

    if sign not in "+-":
        return None
    fields = [_getnum(part, True) for part in (hh, mm, ss)]
    if any(field is None for field in fields):
        return None
    hours, minutes, seconds = (field[0] for field in fields)  # type: ignore[index]
    return (hours, minutes, seconds), rest


def _fail(
    layout: str,
    value: str,
    layout_elem: str,
    value_elem: str,
    message: str = "",
) -> ParseError:
    error = ParseError(layout, value, layout_elem, value_elem, message)
    logger.debug("Date parse failed", layout=layout, value=value, reason=str(error))
    return error


def parse_ymd(layout: str, value: str) -> tuple[int, int, int]:
    """Parse value against a reference-pattern layout.

    Fields missing from the layout default to year 0, January and day 1.
    Time-of-day and zone fields are range-checked and then dropped; the
    civil date is returned as written, whatever zone offset follows it.

    Args:
        layout: The layout describing value.
        value: The string to parse.

    Returns:
        The (year, month, day) of the parsed date.

    Raises:
        ParseError: If value does not match layout, or a field is out of
            range.

    Examples:
        >>> parse_ymd("2006-01-02", "2024-02-29")
        (2024, 2, 29)
        >>> parse_ymd("Jan _2 2006 3:04PM", "Mar  7 2021 11:30AM")
        (2021, 3, 7)
    """
    original_layout, original_value = layout, value

    year = 0
    month = -1
    day = -1
    year_day = -1

    while True:
        prefix, token, suffix = next_chunk(layout)
        rest = _skip(value, prefix)
        if rest is None:
            raise _fail(original_layout, original_value, prefix, value)
        value = rest

        if not token:
            if value:
                raise _fail(
                    original_layout,
                    original_value,
                    "",
                    value,
                    ": extra text: " + quote(value),
                )
            break

        layout = suffix
        hold = value
        range_err = ""
        result: tuple[int, str] | None = None

        if token == "2006":
            result = _parse_year(value)
            if result is not None:
                year = result[0]
        elif token == "06":
            if len(value) >= 2 and _is_digit(value, 0) and _is_digit(value, 1):
                two = int(value[:2])
                result = two, value[2:]
                year = two + (1900 if two >= 69 else 2000)
        elif token in ("January", "Jan"):
            names = LONG_MONTH_NAMES if token == "January" else SHORT_MONTH_NAMES
            result = _lookup(names, value)
            if result is not None:
                month = result[0]
        elif token in ("Monday", "Mon"):
            # The weekday is not checked against the date
            names = LONG_DAY_NAMES if token == "Monday" else SHORT_DAY_NAMES
            result = _lookup(names, value)
        elif token in ("1", "01"):
            result = _getnum(value, token == "01")
            if result is not None:
                month = result[0]
                if month < 1 or month > 12:
                    range_err = "month"
        elif token in ("2", "_2", "02"):
            if token == "_2" and value[:1] == " ":
                value = value[1:]
            # Checked against month and year once parsing completes
            result = _getnum(value, token == "02")
            if result is not None:
                day = result[0]
        elif token in ("__2", "002"):
            if token == "__2":
                for _ in range(2):
                    if value[:1] == " ":
                        value = value[1:]
            result = _getnum3(value, token == "002")
            if result is not None:
                year_day = result[0]
        elif token in ("15", "3", "03"):
            result = _getnum(value, token == "03")
            if result is not None:
                limit = 23 if token == "15" else 12
                if result[0] > limit:
                    range_err = "hour"
        elif token in ("4", "04"):
            result = _getnum(value, token == "04")
            if result is not None and result[0] > 59:
                range_err = "minute"
        elif token in ("5", "05"):
            result = _getnum(value, token == "05")
            if result is not None:
                if result[0] > 59:
                    range_err = "second"
                else:
                    result = result[0], _skip_unlisted_fraction(result[1], layout)
        elif token in ("PM", "pm"):
            if len(value) >= 2 and value[:2] in (("AM", "PM") if token == "PM" else ("am", "pm")):
                result = 0, value[2:]
        elif token == "MST":
            if value.startswith("UTC"):
                result = 0, value[3:]
            else:
                n = _zone_abbrev_length(value)
                if n:
                    result = 0, value[n:]
        elif token[0] in _ZONE_TOKENS:
            zone = _parse_zone(token, value)
            if zone is not None:
                (hours, minutes, seconds), rest = zone
                result = 0, rest
                if hours > 24:
                    range_err = "time zone offset hour"
                elif minutes > 60:
                    range_err = "time zone offset minute"
                elif seconds > 60:
                    range_err = "time zone offset second"
        elif _is_fraction(token):
            result = _parse_fraction(token, value)

        if range_err:
            raise _fail(
                original_layout,
                original_value,
                token,
                hold,
                f": {range_err} out of range",
            )
        if result is None:
            raise _fail(original_layout, original_value, token, hold)
        value = result[1]

    if year_day >= 0:
        if year_day < 1 or year_day > days_in_year(year):
            raise _fail(original_layout, original_value, "", value, ": day-of-year out of range")
        _, yd_month, yd_day = ordinal_to_ymd(ymd_to_ordinal(year, 1, 1) + year_day - 1)
        if month >= 0 and month != yd_month:
            raise _fail(
                original_layout, original_value, "", value, ": day-of-year does not match month"
            )
        if day >= 0 and day != yd_day:
            raise _fail(
                original_layout, original_value, "", value, ": day-of-year does not match day"
            )
        month, day = yd_month, yd_day
    else:
        if month < 0:
            month = 1
        if day < 0:
            day = 1

    if day < 1 or day > days_in_month(year, month):
        raise _fail(original_layout, original_value, "", value, ": day out of range")

    return year, month, day


def _skip_unlisted_fraction(value: str, layout: str) -> str:
    """Drop a fractional second the layout does not spell out."""
    if len(value) >= 2 and value[0] in ".," and _is_digit(value, 1):
        _, token, _ = next_chunk(layout)
        if _is_fraction(token):
            return value
        n = 2
        while _is_digit(value, n):
            n += 1
        return value[n:]
    return value


def _parse_fraction(token: str, value: str) -> tuple[int, str] | None:
    """Read a fractional second for a ".000" or ".999" style token."""
    if token[1] == "0":
        width = len(token)
        if len(value) < width or value[0] not in ".,":
            return None
        if not all(_is_digit(value, i) for i in range(1, width)):
            return None
        return 0, value[width:]

    # ".999": the fraction may be omitted entirely
    if len(value) < 2 or value[0] not in ".," or not _is_digit(value, 1):
        return 0, value
    n = 1
    while _is_digit(value, n):
        n += 1
    return 0, value[n:]


__all__ = ["format_ymd", "parse_ymd", "next_chunk"]
