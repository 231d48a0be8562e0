from .types import DateFormat, Weekday

__all__ = ["DateFormat", "Weekday"]
