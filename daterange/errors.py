"""Exceptions raised by date range and fiscal year calculations."""


class DateRangeError(Exception):
    """Base class for errors raised by the daterange package."""


class ConstructionError(DateRangeError, ValueError):
    """Raised when a fiscal year start month/day is not a valid calendar date."""


class RangeBoundaryError(DateRangeError, IndexError):
    """Raised when a requested day or weekday falls outside of a DateRange."""


class ArgumentTypeError(DateRangeError, TypeError):
    """Raised when a collection of month-days is expected but not supplied."""


class ArgumentFormatError(DateRangeError, ValueError):
    """Raised when a month-day entry does not match the 'mm-dd' format."""


class TimezoneError(DateRangeError, ValueError):
    """Raised when a timezone name cannot be resolved."""
