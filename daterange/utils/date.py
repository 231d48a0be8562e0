"""Date coercion and timezone helpers shared by ranges and fiscal years."""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, tzinfo
from typing import Optional, Union

from dateutil import parser, tz
from pandas import Timestamp

from daterange.errors import TimezoneError

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, Timestamp]
TimezoneLike = Union[str, tzinfo]

UTC = tz.UTC

# Zone used for naive inputs when the caller does not supply one
_DEFAULT_TIMEZONE: tzinfo = UTC


def resolve_timezone(zone: TimezoneLike) -> tzinfo:
    """
    Return a tzinfo for an IANA name (e.g. 'Asia/Tokyo') or pass one through.

    pytz zones (as attached by pandas < 3) are replaced by the dateutil zone
    of the same name, since they only give correct offsets via localize().
    """
    if isinstance(zone, tzinfo):
        name = getattr(zone, "zone", None)  # pytz
        if isinstance(name, str) and name:
            return resolve_timezone(name)
        return zone
    if isinstance(zone, str):
        name = zone.strip()
        if name.upper() in ("UTC", "Z"):
            return UTC
        resolved = tz.gettz(name) if name else None
        if resolved is None:
            raise TimezoneError(f"Unknown timezone: {zone!r}")
        return resolved
    raise TypeError(f"Unsupported type for timezone: {type(zone)}")


def get_default_timezone() -> tzinfo:
    """Zone applied to naive datetimes, dates and strings without an offset."""
    return _DEFAULT_TIMEZONE


def set_default_timezone(zone: TimezoneLike) -> None:
    """Set the zone applied to naive inputs."""
    global _DEFAULT_TIMEZONE
    _DEFAULT_TIMEZONE = resolve_timezone(zone)
    logger.debug("Default timezone set to %s", zone_name(_DEFAULT_TIMEZONE))


def to_datetime(value: DateLike, zone: Optional[TimezoneLike] = None) -> datetime:
    """
    Convert a date-like to a timezone-aware datetime.

    Accepts datetimes, dates (midnight), pandas Timestamps and strings in any
    format dateutil can parse. Naive values are read as wall-clock time in
    ``zone``, or in the default timezone when ``zone`` is None. Aware values
    keep their own zone; a pytz zone is swapped for its dateutil equivalent.
    """
    if isinstance(value, Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, str):
        try:
            value = parser.parse(value)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Unsupported date string format: {value!r}") from exc
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    else:
        raise TypeError(f"Unsupported type for date: {type(value)}")

    if moment.tzinfo is None or moment.utcoffset() is None:
        local_zone = resolve_timezone(zone) if zone is not None else _DEFAULT_TIMEZONE
        return moment.replace(tzinfo=local_zone)

    own_zone = resolve_timezone(moment.tzinfo)
    if own_zone is not moment.tzinfo:
        moment = moment.astimezone(own_zone)
    return moment


def to_utc(value: DateLike) -> datetime:
    """Canonical UTC form of a date-like."""
    return to_datetime(value).astimezone(UTC)


def epoch_seconds(moment: datetime) -> int:
    """Whole seconds since 1970-01-01 UTC, as date('U') reports them."""
    return calendar.timegm(moment.utctimetuple())


def php_weekday(moment: Union[date, datetime]) -> int:
    """Weekday number with 0 = Sunday .. 6 = Saturday."""
    return moment.isoweekday() % 7


def zone_name(zone: tzinfo, moment: Optional[datetime] = None) -> str:
    """Best identifier for a zone: IANA key when known, else its abbreviation."""
    if zone is UTC or zone == UTC:
        return "UTC"
    key = getattr(zone, "key", None)  # zoneinfo.ZoneInfo
    if key:
        return key
    # dateutil tzfile keeps the path it was loaded from
    filename = getattr(zone, "_filename", None)
    if isinstance(filename, str) and filename:
        return filename.split("zoneinfo/", 1)[-1].lstrip("/")
    abbreviation = zone.tzname(moment)
    if abbreviation:
        return abbreviation
    offset = zone.utcoffset(moment)
    if offset is None:
        return "UTC"
    seconds = int(offset.total_seconds())
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"
