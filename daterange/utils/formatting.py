"""
PHP ``date()``-compatible formatting for timezone-aware datetimes.

Every character of a pattern is looked up in a token registry; registered
tokens are replaced by their rendering, a backslash emits the following
character verbatim, and anything else is copied as-is. Month and day names
are always English, independent of the process locale.
"""

from __future__ import annotations

import calendar
from datetime import datetime
from typing import Callable, Dict, Union

from daterange.conventions.types import DateFormat
from daterange.utils.date import epoch_seconds, php_weekday, zone_name

TokenFunc = Callable[[datetime], str]
FormatLike = Union[str, DateFormat]

_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _offset_seconds(moment: datetime) -> int:
    offset = moment.utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def _offset(moment: datetime, separator: str = "") -> str:
    seconds = _offset_seconds(moment)
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _twelve_hour(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _swatch_beat(moment: datetime) -> str:
    # Biel Mean Time is UTC+1; a day has 1000 beats of 86.4 seconds
    seconds = (epoch_seconds(moment) + 3600) % 86400
    return f"{seconds * 10 // 864:03d}"


def _is_dst(moment: datetime) -> str:
    dst = moment.dst()
    return "1" if dst is not None and dst.total_seconds() != 0 else "0"


def _abbreviation(moment: datetime) -> str:
    return moment.tzname() or _offset(moment, ":")


def _zone_identifier(moment: datetime) -> str:
    if moment.tzinfo is None:
        return "UTC"
    return zone_name(moment.tzinfo, moment)


_REGISTRY: Dict[str, TokenFunc] = {
    # day
    "d": lambda m: f"{m.day:02d}",
    "D": lambda m: _DAY_NAMES[m.weekday()][:3],
    "j": lambda m: str(m.day),
    "l": lambda m: _DAY_NAMES[m.weekday()],
    "N": lambda m: str(m.isoweekday()),
    "S": lambda m: _ordinal_suffix(m.day),
    "w": lambda m: str(php_weekday(m)),
    "z": lambda m: str(m.timetuple().tm_yday - 1),
    # week
    "W": lambda m: f"{m.isocalendar()[1]:02d}",
    # month
    "F": lambda m: _MONTH_NAMES[m.month - 1],
    "m": lambda m: f"{m.month:02d}",
    "M": lambda m: _MONTH_NAMES[m.month - 1][:3],
    "n": lambda m: str(m.month),
    "t": lambda m: str(calendar.monthrange(m.year, m.month)[1]),
    # year
    "L": lambda m: "1" if calendar.isleap(m.year) else "0",
    "o": lambda m: str(m.isocalendar()[0]),
    "Y": lambda m: f"{m.year:04d}",
    "y": lambda m: f"{m.year % 100:02d}",
    # time
    "a": lambda m: "am" if m.hour < 12 else "pm",
    "A": lambda m: "AM" if m.hour < 12 else "PM",
    "B": _swatch_beat,
    "g": lambda m: str(_twelve_hour(m)),
    "G": lambda m: str(m.hour),
    "h": lambda m: f"{_twelve_hour(m):02d}",
    "H": lambda m: f"{m.hour:02d}",
    "i": lambda m: f"{m.minute:02d}",
    "s": lambda m: f"{m.second:02d}",
    "u": lambda m: f"{m.microsecond:06d}",
    "v": lambda m: f"{m.microsecond // 1000:03d}",
    # timezone
    "e": _zone_identifier,
    "I": _is_dst,
    "O": lambda m: _offset(m),
    "P": lambda m: _offset(m, ":"),
    "p": lambda m: "Z" if _offset_seconds(m) == 0 else _offset(m, ":"),
    "T": _abbreviation,
    "Z": lambda m: str(_offset_seconds(m)),
    # full date/time
    "c": lambda m: format_datetime(m, "Y-m-d\\TH:i:sP"),
    "r": lambda m: format_datetime(m, "D, d M Y H:i:s O"),
    "U": lambda m: str(epoch_seconds(m)),
}


def resolve_format(fmt: FormatLike) -> str:
    """Return the pattern string for a DateFormat or a custom pattern."""
    if isinstance(fmt, DateFormat):
        return fmt.pattern()
    if isinstance(fmt, str):
        return fmt
    raise TypeError(f"Unsupported type for format: {type(fmt)}")


def format_datetime(moment: datetime, fmt: FormatLike) -> str:
    """Render ``moment`` with a date() pattern, e.g. 'Y-m-d H:i:s'."""
    pattern = resolve_format(fmt)
    out = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\" and i + 1 < len(pattern):
            i += 1
            out.append(pattern[i])
        elif char in _REGISTRY:
            out.append(_REGISTRY[char](moment))
        else:
            out.append(char)
        i += 1
    return "".join(out)


def get_format_token(char: str) -> TokenFunc:
    """Return the renderer registered for a format character."""
    try:
        return _REGISTRY[char]
    except KeyError as exc:
        raise ValueError(f"Unsupported format token: {char!r}") from exc


def register_format_token(char: str, func: TokenFunc) -> None:
    """Register a renderer for an unused single format character."""
    if len(char) != 1 or char == "\\":
        raise ValueError(f"Format token must be a single character: {char!r}")
    if char in _REGISTRY:
        raise ValueError(f"Format token '{char}' already registered")
    _REGISTRY[char] = func
