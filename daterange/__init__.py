"""Calendar arithmetic over timezone-aware date ranges.

This package generates calendar views of a start/end pair and maps dates onto
fiscal years.

Key modules:
- ranges: DateRange and the 'mm-dd' MonthDay type
- fiscal: FiscalYear definitions
- schedule: month/day boundaries and step generators
- conventions: Weekday numbering and named date() formats
- utils: date coercion, timezones and date() formatting
"""

from daterange.errors import (
    ArgumentFormatError,
    ArgumentTypeError,
    ConstructionError,
    DateRangeError,
    RangeBoundaryError,
    TimezoneError,
)
from daterange.conventions import DateFormat, Weekday
from daterange.utils import (
    format_datetime,
    get_default_timezone,
    register_format_token,
    set_default_timezone,
)
from daterange.ranges import DateRange, DateRangeLike, MonthDay
from daterange.fiscal import FiscalYear

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "DateRange",
    "DateRangeLike",
    "FiscalYear",
    "MonthDay",
    "DateFormat",
    "Weekday",
    "format_datetime",
    "get_default_timezone",
    "register_format_token",
    "set_default_timezone",
    "DateRangeError",
    "ConstructionError",
    "RangeBoundaryError",
    "ArgumentTypeError",
    "ArgumentFormatError",
    "TimezoneError",
]
