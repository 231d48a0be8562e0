from .date import (
    UTC,
    DateLike,
    TimezoneLike,
    epoch_seconds,
    get_default_timezone,
    php_weekday,
    resolve_timezone,
    set_default_timezone,
    to_datetime,
    to_utc,
    zone_name,
)
from .formatting import (
    FormatLike,
    format_datetime,
    get_format_token,
    register_format_token,
    resolve_format,
)

__all__ = [
    "UTC",
    "DateLike",
    "TimezoneLike",
    "FormatLike",
    "epoch_seconds",
    "format_datetime",
    "get_default_timezone",
    "get_format_token",
    "php_weekday",
    "register_format_token",
    "resolve_format",
    "resolve_timezone",
    "set_default_timezone",
    "to_datetime",
    "to_utc",
    "zone_name",
]
