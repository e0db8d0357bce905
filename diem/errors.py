"""Diem exception hierarchy.

All Diem-specific exceptions inherit from DiemError. Only parsing can
fail: construction and arithmetic normalize out-of-range fields instead
of raising.
"""

from __future__ import annotations


class DiemError(Exception):
    """Base exception for all Diem errors."""

    pass


class ParseError(DiemError, ValueError):
    """Failed to parse a string against a layout.

    Attributes:
        layout: The layout the value was parsed against.
        value: The full input string.
        layout_elem: The layout token that failed to match.
        value_elem: The remainder of the input at the point of failure.
        message: A description that replaces the default
            "cannot parse" wording when set.

    Examples:
        >>> str(ParseError("2006-01-02", "not-a-date", "2006", "not-a-date"))
        'parsing date "not-a-date" as "2006-01-02": cannot parse "not-a-date" as "2006"'

        >>> str(ParseError("2006-01-02", "2021-13-01", "", "", ": month out of range"))
        'parsing date "2021-13-01": month out of range'
    """

    def __init__(
        self,
        layout: str,
        value: str,
        layout_elem: str,
        value_elem: str,
        message: str = "",
    ) -> None:
        self.layout = layout
        self.value = value
        self.layout_elem = layout_elem
        self.value_elem = value_elem
        self.message = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.message:
            return f"parsing date {quote(self.value)}{self.message}"
        return (
            f"parsing date {quote(self.value)} as {quote(self.layout)}: "
            f"cannot parse {quote(self.value_elem)} as {quote(self.layout_elem)}"
        )


def quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


__all__ = [
    "DiemError",
    "ParseError",
]
