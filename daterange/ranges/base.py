"""
Protocol describing the public interface of a date range.
"""

from datetime import date, datetime
from typing import Collection, List, Optional, Protocol, Union, runtime_checkable

from daterange.utils.date import DateLike, TimezoneLike
from daterange.utils.formatting import FormatLike


@runtime_checkable
class DateRangeLike(Protocol):
    """
    Interface for objects that generate calendar views from a start and end.

    All readers project into a single return timezone. Setters return the
    instance they were called on so calls can be chained.
    """

    def set_return_timezone(self, zone: TimezoneLike) -> "DateRangeLike":
        """Set the timezone results are returned in."""
        ...

    def set_start(self, start: DateLike) -> "DateRangeLike":
        """Set the start of the range."""
        ...

    def set_end(self, end: DateLike) -> "DateRangeLike":
        """Set the end of the range."""
        ...

    def get_start(self, fmt: Optional[FormatLike] = None) -> Union[datetime, str]:
        """Start as a datetime, or as a string when a date() format is given."""
        ...

    def get_end(self, fmt: Optional[FormatLike] = None) -> Union[datetime, str]:
        """End as a datetime, or as a string when a date() format is given."""
        ...

    def get_years(self, fmt: FormatLike = "Y") -> List[str]:
        """Formatted years in the range."""
        ...

    def get_months(self, fmt: FormatLike = "Y-m") -> List[str]:
        """Formatted months in the range."""
        ...

    def get_days(self, fmt: FormatLike = "Y-m-d") -> List[str]:
        """Formatted days in the range."""
        ...

    def split_by_month(self) -> List["DateRangeLike"]:
        """One range per calendar month touched."""
        ...

    def as_seconds(self) -> float:
        """Seconds between start and end."""
        ...

    def as_minutes(self) -> int:
        """Complete minutes between start and end."""
        ...

    def as_hours(self) -> int:
        """Complete hours between start and end."""
        ...

    def as_days(self) -> int:
        """Complete days between start and end."""
        ...

    def get_day_of_range(self, day: int) -> date:
        """Numbered day of the range; negative numbers count from the end."""
        ...

    def get_weekday_of_range(self, week: int, weekday: int) -> date:
        """First, second, ..., last, ... given weekday of the range."""
        ...

    def number_of_dates_occurring(self, dates: Collection) -> int:
        """How many times the given 'mm-dd' values occur in the range."""
        ...
