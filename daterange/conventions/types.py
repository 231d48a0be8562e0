"""
Basic types and enums used across ranges and fiscal years.
"""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Day of week, numbered as PHP's date('w'): 0 = Sunday .. 6 = Saturday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class DateFormat(Enum):
    """Named date() patterns. Any plain pattern string is accepted as well."""

    YEAR = "Y"
    MONTH = "Y-m"
    DAY = "Y-m-d"
    MONTH_DAY = "m-d"
    DATETIME = "Y-m-d H:i:s"
    ISO8601 = "c"  # 2014-08-05T00:00:00-04:00
    RFC2822 = "r"  # Tue, 05 Aug 2014 00:00:00 -0400
    EPOCH = "U"
    WEEKDAY = "w"

    def pattern(self) -> str:
        return self.value
