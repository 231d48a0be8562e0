from .base import DateRangeLike
from .date_range import DateRange
from .monthday import MonthDay, parse_month_days

__all__ = ["DateRange", "DateRangeLike", "MonthDay", "parse_month_days"]
