"""
tests/ranges/test_date_range_properties.py

Property-based checks of DateRange over naive (default timezone) inputs.

Covers:
  - Day enumeration length and ordering
  - split_by_month endpoints and piece count
  - First/last day and weekday lookups
  - Duration floors
  - Month-day occurrence counts
"""

from __future__ import annotations

from datetime import datetime, timedelta

from hypothesis import HealthCheck, assume, given, settings
from hypothesis import strategies as st

from daterange import DateRange, MonthDay, Weekday
from daterange.utils import php_weekday

_MOMENTS = st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2030, 12, 31))


@st.composite
def ordered_ranges(draw, max_days: int = 800):
    """DateRange with start <= end and a span of at most ``max_days``."""
    start = draw(_MOMENTS).replace(microsecond=0)
    span = draw(st.integers(min_value=0, max_value=max_days * 86400))
    return DateRange(start, start + timedelta(seconds=span))


# ── Enumerations ──────────────────────────────────────────────────────────────

@given(ordered_ranges())
@settings(max_examples=100, deadline=None)
def test_day_count_matches_calendar_span(rng):
    days = rng.get_days()
    assert len(days) == (rng.end.date() - rng.start.date()).days + 1
    assert days == sorted(days)
    assert days[0] == rng.get_start("Y-m-d")
    assert days[-1] == rng.get_end("Y-m-d")


@given(ordered_ranges())
@settings(max_examples=100, deadline=None)
def test_months_and_years_bracket_range(rng):
    months = rng.get_months()
    years = rng.get_years()
    assert months[0] == rng.get_start("Y-m")
    assert months[-1] == rng.get_end("Y-m")
    assert years == [str(y) for y in range(rng.start.year, rng.end.year + 1)]


@given(ordered_ranges())
@settings(max_examples=100, deadline=None)
def test_split_by_month_covers_range(rng):
    pieces = rng.split_by_month()
    assert len(pieces) == len(rng.get_months())
    assert pieces[0].start == rng.start
    assert pieces[-1].end == rng.end
    for piece in pieces:
        assert len(piece.get_months()) == 1
    for left, right in zip(pieces, pieces[1:]):
        assert (right.start - left.end) == timedelta(seconds=1)


# ── Lookups ───────────────────────────────────────────────────────────────────

@given(ordered_ranges())
@settings(max_examples=100, deadline=None)
def test_first_and_last_day(rng):
    assert rng.get_day_of_range(1) == rng.start.date()
    assert rng.get_day_of_range(-1) == rng.end.date()


@given(ordered_ranges(), st.sampled_from(list(Weekday)))
@settings(max_examples=100, deadline=None, suppress_health_check=[HealthCheck.filter_too_much])
def test_first_weekday_is_within_a_week_of_start(rng, weekday):
    span = (rng.end.date() - rng.start.date()).days
    assume(span >= 6)
    first = rng.get_weekday_of_range(1, weekday)
    last = rng.get_weekday_of_range(-1, weekday)
    assert php_weekday(first) == weekday
    assert php_weekday(last) == weekday
    assert 0 <= (first - rng.start.date()).days < 7
    assert 0 <= (rng.end.date() - last).days < 7


# ── Durations and counts ──────────────────────────────────────────────────────

@given(ordered_ranges())
@settings(max_examples=100, deadline=None)
def test_durations_floor_elapsed_seconds(rng):
    seconds = int((rng.end - rng.start).total_seconds())
    assert rng.as_seconds() == seconds
    assert rng.as_minutes() == seconds // 60
    assert rng.as_hours() == seconds // 3600
    assert rng.as_days() == seconds // 86400


@given(ordered_ranges(max_days=400))
@settings(max_examples=50, deadline=None)
def test_every_day_counts_once_for_its_own_month_day(rng):
    days = [datetime.strptime(day, "%Y-%m-%d") for day in rng.get_days()]
    month_days = {MonthDay.from_date(day) for day in days}
    assert rng.number_of_dates_occurring(month_days) == len(days)
