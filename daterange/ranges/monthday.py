"""Recurring calendar day (month and day, no year)."""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass
from datetime import date
from typing import Any, FrozenSet, Union

from daterange.errors import ArgumentFormatError, ArgumentTypeError

_MONTH_DAY_PATTERN = re.compile(r"[0-9]{2}-[0-9]{2}")

# Leap year, so that 02-29 is accepted
_REFERENCE_YEAR = 2000


@dataclass(frozen=True)
class MonthDay:
    """A day of the year written 'mm-dd', e.g. MonthDay(12, 21) is '12-21'."""

    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            date(_REFERENCE_YEAR, self.month, self.day)
        except (TypeError, ValueError) as exc:
            raise ArgumentFormatError(
                f"Not a calendar month-day: month={self.month!r}, day={self.day!r}"
            ) from exc

    @classmethod
    def parse(cls, text: Any) -> MonthDay:
        """Parse 'mm-dd'; anything else raises ArgumentFormatError."""
        if not isinstance(text, str) or not _MONTH_DAY_PATTERN.fullmatch(text):
            raise ArgumentFormatError("Submitted data does not match 'mm-dd' format")
        return cls(int(text[:2]), int(text[3:]))

    @classmethod
    def from_date(cls, value: date) -> MonthDay:
        return cls(value.month, value.day)

    def __str__(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"


def parse_month_days(values: Collection[Union[str, MonthDay]]) -> FrozenSet[MonthDay]:
    """
    Parse a collection of 'mm-dd' strings (or MonthDay values) into a set.

    Raises ArgumentTypeError if ``values`` is not a collection (a bare string
    is rejected) and ArgumentFormatError for any malformed entry. Entries
    that match the pattern but name no calendar day (e.g. "13-45") are
    rejected as well rather than counted as never occurring.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Collection):
        raise ArgumentTypeError("Collection of 'mm-dd' not supplied")
    return frozenset(
        value if isinstance(value, MonthDay) else MonthDay.parse(value)
        for value in values
    )
