"""
Calendar boundary adjustments on wall-clock datetimes.
"""

from datetime import date, datetime, timedelta


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)

    return next_month - timedelta(days=1)


def start_of_day(dt: datetime) -> datetime:
    """Midnight of the same day, keeping tzinfo."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(dt: datetime) -> datetime:
    """23:59:59 of the same day, keeping tzinfo."""
    return dt.replace(hour=23, minute=59, second=59, microsecond=0)


def start_of_month(dt: datetime) -> datetime:
    """Midnight of the first day of the month."""
    return start_of_day(dt).replace(day=1)


def end_of_month(dt: datetime) -> datetime:
    """23:59:59 of the last day of the month."""
    last = get_month_end(dt.year, dt.month)
    return end_of_day(dt.replace(day=last.day))


def start_of_year(year: int) -> datetime:
    """Naive midnight of January 1st."""
    return datetime(year, 1, 1)
