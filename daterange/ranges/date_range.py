"""
Date range value type.

A DateRange keeps its start and end as UTC instants and projects every
result into a single return timezone, so mixing inputs from different zones
gives consistent calendar views.

Example (reference calendar, August 2014)::

    Su Mo Tu We Th Fr Sa
                    1  2
     3  4  5  6  7  8  9
    10 11 12 13 14 15 16
    17 18 19 20 21 22 23
    24 25 26 27 28 29 30
    31

    >>> rng = DateRange("2014-08-05", "2014-08-28")
    >>> rng.get_day_of_range(5)
    datetime.date(2014, 8, 9)
    >>> rng.get_weekday_of_range(-1, Weekday.FRIDAY)
    datetime.date(2014, 8, 22)

The range does not require ``start <= end``. With an inverted range the day
enumeration is empty, durations are negative and a range spanning months
splits into nothing.

Setters mutate the instance in place and return it. Instances are not safe
for concurrent mutation; use ``copy()`` to hand out an independent range.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, tzinfo
from typing import Collection, Iterator, List, Optional, Union

from daterange.conventions.types import DateFormat, Weekday
from daterange.errors import RangeBoundaryError
from daterange.ranges.monthday import MonthDay, parse_month_days
from daterange.schedule import (
    end_of_month,
    iter_days,
    iter_months,
    iter_years,
    start_of_day,
    start_of_month,
)
from daterange.utils.date import (
    UTC,
    DateLike,
    TimezoneLike,
    epoch_seconds,
    php_weekday,
    resolve_timezone,
    to_datetime,
    to_utc,
    zone_name,
)
from daterange.utils.formatting import FormatLike, format_datetime

logger = logging.getLogger(__name__)

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 3600
_SECONDS_PER_DAY = 86400


class DateRange:
    """Generate calendar views (years, months, days, durations) of a start/end pair."""

    def __init__(
        self,
        start: DateLike,
        end: DateLike,
        return_timezone: Optional[TimezoneLike] = None,
    ):
        """
        Initialize a date range.

        Args:
            start: Start of the range; naive values use the default timezone
            end: End of the range; naive values use the default timezone
            return_timezone: Zone results are returned in. Defaults to the
                zone of ``start``.
        """
        start_local = to_datetime(start)
        self._start = to_utc(start_local)
        self._end = to_utc(end)
        if return_timezone is None:
            self._return_timezone = start_local.tzinfo
        else:
            self._return_timezone = resolve_timezone(return_timezone)
        self._warn_if_inverted()

    def _warn_if_inverted(self) -> None:
        if self._start > self._end:
            logger.debug(
                "DateRange start %s is after end %s; derived results are degenerate",
                self._start.isoformat(),
                self._end.isoformat(),
            )

    def set_return_timezone(self, zone: TimezoneLike) -> DateRange:
        """Set the timezone results are returned in."""
        self._return_timezone = resolve_timezone(zone)
        return self

    def set_start(self, start: DateLike) -> DateRange:
        """Set the start of the range."""
        self._start = to_utc(start)
        self._warn_if_inverted()
        return self

    def set_end(self, end: DateLike) -> DateRange:
        """Set the end of the range."""
        self._end = to_utc(end)
        self._warn_if_inverted()
        return self

    def copy(self) -> DateRange:
        """Independent range with the same start, end and return timezone."""
        return DateRange(self._start, self._end, self._return_timezone)

    @property
    def return_timezone(self) -> tzinfo:
        return self._return_timezone

    @property
    def start(self) -> datetime:
        return self._start.astimezone(self._return_timezone)

    @property
    def end(self) -> datetime:
        return self._end.astimezone(self._return_timezone)

    def get_start(self, fmt: Optional[FormatLike] = None) -> Union[datetime, str]:
        """
        Start of the range in the return timezone.

        Returns a datetime without ``fmt``, otherwise a string formatted with
        a date() pattern such as 'Y-m-d H:i:s'.
        """
        if fmt is None:
            return self.start
        return format_datetime(self.start, fmt)

    def get_end(self, fmt: Optional[FormatLike] = None) -> Union[datetime, str]:
        """End of the range in the return timezone; see ``get_start``."""
        if fmt is None:
            return self.end
        return format_datetime(self.end, fmt)

    def contains(self, moment: DateLike) -> bool:
        """True if ``moment`` lies within [start, end]; naive values use the return timezone."""
        instant = to_datetime(moment, self._return_timezone).astimezone(UTC)
        return self._start <= instant <= self._end

    @staticmethod
    def _wall(moment: datetime) -> datetime:
        return moment.replace(tzinfo=None)

    def _render(self, wall_clock: datetime, fmt: FormatLike) -> str:
        return format_datetime(wall_clock.replace(tzinfo=self._return_timezone), fmt)

    def _iter_days(self) -> Iterator[datetime]:
        return iter_days(
            start_of_day(self._wall(self.start)), start_of_day(self._wall(self.end))
        )

    def _iter_months(self) -> Iterator[datetime]:
        return iter_months(
            start_of_month(self._wall(self.start)), start_of_month(self._wall(self.end))
        )

    def get_years(self, fmt: FormatLike = DateFormat.YEAR) -> List[str]:
        """January 1st of every year in the range, formatted."""
        return [
            self._render(year, fmt)
            for year in iter_years(self.start.year, self.end.year)
        ]

    def get_months(self, fmt: FormatLike = DateFormat.MONTH) -> List[str]:
        """First day of every month in the range, formatted."""
        return [self._render(month, fmt) for month in self._iter_months()]

    def get_days(self, fmt: FormatLike = DateFormat.DAY) -> List[str]:
        """Midnight of every day in the range, formatted."""
        return [self._render(day, fmt) for day in self._iter_days()]

    def split_by_month(self) -> List[DateRange]:
        """
        Split the range into one DateRange per calendar month.

        The first piece runs from this range's start to the end of its month,
        full months in between cover the whole month (to 23:59:59 of the last
        day), and the last piece runs from the first of its month to the
        end of this range. Every piece is built in this range's return timezone.
        """
        start = self.start
        end = self.end
        if (start.year, start.month) == (end.year, end.month):
            return [self.copy()]

        zone = self._return_timezone
        months = list(self._iter_months())
        if not months:
            return []
        first, *interior, last = months

        pieces = [DateRange(start, end_of_month(first).replace(tzinfo=zone))]
        for month in interior:
            pieces.append(
                DateRange(
                    month.replace(tzinfo=zone),
                    end_of_month(month).replace(tzinfo=zone),
                )
            )
        pieces.append(DateRange(last.replace(tzinfo=zone), end))
        logger.debug("Split %r into %d monthly ranges", self, len(pieces))
        return pieces

    def _elapsed_seconds(self) -> int:
        return epoch_seconds(self.end) - epoch_seconds(self.start)

    def as_seconds(self) -> float:
        """Number of seconds between start and end."""
        return float(self._elapsed_seconds())

    def as_minutes(self) -> int:
        """Number of complete minutes between start and end."""
        return self._elapsed_seconds() // _SECONDS_PER_MINUTE

    def as_hours(self) -> int:
        """Number of complete hours between start and end."""
        return self._elapsed_seconds() // _SECONDS_PER_HOUR

    def as_days(self) -> int:
        """Number of complete days between start and end."""
        return self._elapsed_seconds() // _SECONDS_PER_DAY

    def _check_within(self, target: date, what: str) -> date:
        if target < self.start.date() or target > self.end.date():
            raise RangeBoundaryError(f"Requested {what} falls outside of DateRange")
        return target

    def get_day_of_range(self, day: int) -> date:
        """
        Return the numbered day of the range.

        Positive numbers count from the start, negative numbers from the end
        (2015-01-01 to 2015-01-31: 1 -> 01-01, 10 -> 01-10, -1 -> 01-31,
        -5 -> 01-27). Day 0 is not a position and raises RangeBoundaryError,
        as does any day outside the range.
        """
        if day == 0:
            raise RangeBoundaryError("Day 0 is not a day of DateRange; count from 1 or -1")
        try:
            if day > 0:
                target = self.start.date() + timedelta(days=day - 1)
            else:
                target = self.end.date() - timedelta(days=abs(day) - 1)
        except OverflowError as exc:
            raise RangeBoundaryError("Requested day falls outside of DateRange") from exc
        return self._check_within(target, "day")

    def get_weekday_of_range(self, week: int, weekday: Union[int, Weekday]) -> date:
        """
        Return the first, second, ... (or last, second to last, ...) weekday.

        ``weekday`` uses 0 = Sunday .. 6 = Saturday. A positive ``week``
        counts weeks from the start of the range, a negative one from the end.
        Raises RangeBoundaryError if the day falls outside of the range.
        """
        weekday = Weekday(weekday)
        if week == 0:
            raise ValueError("week must be a non-zero number of weeks")
        try:
            if week > 0:
                target = self._first_weekday_of_range(week, weekday)
            else:
                target = self._last_weekday_of_range(week, weekday)
        except OverflowError as exc:
            raise RangeBoundaryError("Requested weekday falls outside of DateRange") from exc
        return self._check_within(target, "weekday")

    def _first_weekday_of_range(self, week: int, weekday: Weekday) -> date:
        start = self.start.date()
        days = (weekday - php_weekday(start)) % 7
        return start + timedelta(days=days, weeks=week - 1)

    def _last_weekday_of_range(self, week: int, weekday: Weekday) -> date:
        end = self.end.date()
        days = (php_weekday(end) - weekday) % 7
        return end - timedelta(days=days, weeks=abs(week) - 1)

    def number_of_dates_occurring(self, dates: Collection[Union[str, MonthDay]]) -> int:
        """
        Count how often the given month-days occur in the range.

        For 2014-01-01 to 2016-12-01 and ['04-21', '06-12', '12-31'] this is
        8: three of each, except 12-31 which occurs twice.
        """
        targets = parse_month_days(dates)
        found = sum(1 for day in self._iter_days() if MonthDay.from_date(day) in targets)
        logger.debug("Found %d occurrences of %d month-days in %r", found, len(targets), self)
        return found

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and self._return_timezone == other._return_timezone
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"DateRange(start={self.get_start(DateFormat.ISO8601)!r}, "
            f"end={self.get_end(DateFormat.ISO8601)!r}, "
            f"return_timezone={zone_name(self._return_timezone, self.start)!r})"
        )
