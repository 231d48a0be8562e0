"""
Fiscal year calculations based on a fixed start month and day.

Fiscal years are named after the calendar year they end in, so a fiscal year
ending on June 1, 2015 is fiscal year 2015.

Only fiscal years that map to a static calendar date are handled; years that
end on a variable day (such as the last Friday of a month) are not. Historical
changes of the fiscal year definition are not handled either: one rule
applies to every year evaluated.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from daterange.errors import ConstructionError
from daterange.ranges.date_range import DateRange
from daterange.utils.date import (
    DateLike,
    TimezoneLike,
    get_default_timezone,
    resolve_timezone,
    to_datetime,
)

logger = logging.getLogger(__name__)

# Non-leap, so a fiscal year never starts or ends on February 29th
REFERENCE_YEAR = 2001

_ONE_SECOND = timedelta(seconds=1)
_ONE_YEAR = relativedelta(years=1)


class FiscalYear:
    """Map dates to fiscal years and fiscal years to DateRanges."""

    def __init__(
        self,
        start_month: int,
        start_day: int,
        timezone: Optional[TimezoneLike] = None,
    ):
        """
        Initialize a fiscal year definition.

        The end month and day are derived as one day before the start.

        Args:
            start_month: Calendar month the fiscal year starts (1 = Jan, 2 = Feb, ...)
            start_day: Day of month the fiscal year starts
            timezone: Zone boundaries are evaluated in. Defaults to the
                package default timezone at the time of each call.
        """
        try:
            fy_start = date(REFERENCE_YEAR, start_month, start_day)
        except (TypeError, ValueError) as exc:
            raise ConstructionError(
                f"Invalid fiscal year start: month={start_month!r}, day={start_day!r}"
            ) from exc
        fy_end = fy_start - timedelta(days=1)

        self._start_month = fy_start.month
        self._start_day = fy_start.day
        self._end_month = fy_end.month
        self._end_day = fy_end.day
        self._timezone = resolve_timezone(timezone) if timezone is not None else None
        logger.debug(
            "Fiscal year starts %02d-%02d, ends %02d-%02d",
            self._start_month,
            self._start_day,
            self._end_month,
            self._end_day,
        )

    @property
    def start_month(self) -> int:
        return self._start_month

    @property
    def start_day(self) -> int:
        return self._start_day

    @property
    def end_month(self) -> int:
        return self._end_month

    @property
    def end_day(self) -> int:
        return self._end_day

    @property
    def timezone(self) -> tzinfo:
        if self._timezone is None:
            return get_default_timezone()
        return self._timezone

    def _localize(self, value: DateLike) -> datetime:
        """Wall-clock time of ``value`` in the fiscal timezone, to the second."""
        zone = self.timezone
        return to_datetime(value, zone).astimezone(zone).replace(microsecond=0)

    def _fiscal_year_end(self, fiscal_year: int) -> datetime:
        return datetime(
            fiscal_year, self._end_month, self._end_day, 23, 59, 59, tzinfo=self.timezone
        )

    def get_fiscal_year(self, value: DateLike) -> int:
        """Fiscal year (4-digit integer) a date falls in."""
        moment = self._localize(value)
        if moment <= self._fiscal_year_end(moment.year):
            return moment.year
        return moment.year + 1

    def date_to_fy_string(
        self, value: DateLike, num_digits: int = 4, prefix: Optional[str] = None
    ) -> str:
        """
        Convert a date to a fiscal year label.

        Args:
            value: Date to convert
            num_digits: 4 for '2016', 2 for '16'
            prefix: String to prefix, e.g. 'FY' for 'FY2016'
        """
        if num_digits not in (2, 4):
            raise ValueError("num_digits must be 2 or 4")
        fiscal_year = self.get_fiscal_year(value)
        label = f"{fiscal_year % 100:02d}" if num_digits == 2 else f"{fiscal_year:04d}"
        return f"{prefix or ''}{label}"

    def date_to_fy_date_range(self, value: DateLike) -> DateRange:
        """DateRange of the fiscal year a date falls in."""
        return self.year_to_fy_date_range(self.get_fiscal_year(value))

    def year_to_fy_date_range(self, fiscal_year: Union[int, str]) -> DateRange:
        """DateRange from the first second to the last second of a fiscal year."""
        end = self._fiscal_year_end(int(fiscal_year))
        start = end - _ONE_YEAR + _ONE_SECOND
        return DateRange(start, end)

    def date_in_fy(self, value: DateLike, fiscal_year: Union[int, str]) -> bool:
        """Check if a date lies within the given fiscal year."""
        return self.year_to_fy_date_range(fiscal_year).contains(self._localize(value))

    def __repr__(self) -> str:
        return f"FiscalYear(start_month={self._start_month}, start_day={self._start_day})"
