"""
Step generators over wall-clock datetimes.

The generators work on naive datetimes so that stepping follows the
calendar rather than elapsed time; callers attach a zone when rendering.
Both bounds are inclusive and an inverted pair yields nothing.
"""

from datetime import datetime, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta

from .adjustments import start_of_year

_ONE_DAY = timedelta(days=1)


def iter_years(first_year: int, last_year: int) -> Iterator[datetime]:
    """January 1st, 00:00:00 of every year in [first_year, last_year]."""
    for year in range(first_year, last_year + 1):
        yield start_of_year(year)


def iter_months(first: datetime, last: datetime) -> Iterator[datetime]:
    """Step one calendar month at a time from ``first`` up to ``last``."""
    current = first
    steps = 0
    while current <= last:
        yield current
        steps += 1
        # Step from the anchor so day-of-month never drifts (Jan 31 -> Feb 28 -> Mar 31)
        current = first + relativedelta(months=steps)


def iter_days(first: datetime, last: datetime) -> Iterator[datetime]:
    """Step one calendar day at a time from ``first`` up to ``last``."""
    current = first
    while current <= last:
        yield current
        current += _ONE_DAY
