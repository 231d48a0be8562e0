"""
Shared fixtures.

Reference calendar for the August 2014 fixtures:

        August 2014
    Su Mo Tu We Th Fr Sa
                    1  2
     3  4  5  6  7  8  9
    10 11 12 13 14 15 16
    17 18 19 20 21 22 23
    24 25 26 27 28 29 30
    31
"""

from datetime import datetime

import pytest
from dateutil import tz

from daterange import DateRange
from daterange.utils.date import get_default_timezone, set_default_timezone

NEW_YORK = tz.gettz("America/New_York")
TOKYO = tz.gettz("Asia/Tokyo")
VANCOUVER = tz.gettz("America/Vancouver")


@pytest.fixture
def august_range():
    """2014-08-05 (given in Tokyo) to 2014-08-28 (given in Vancouver), returned in New York."""
    return DateRange(
        datetime(2014, 8, 5, tzinfo=NEW_YORK).astimezone(TOKYO),
        datetime(2014, 8, 28, tzinfo=NEW_YORK).astimezone(VANCOUVER),
        NEW_YORK,
    )


@pytest.fixture
def restore_default_timezone():
    """Put the package default timezone back after a test changes it."""
    previous = get_default_timezone()
    yield
    set_default_timezone(previous)
