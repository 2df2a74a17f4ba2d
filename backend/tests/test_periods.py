from __future__ import annotations

import dataclasses
from datetime import date, datetime, timedelta

import pytest

from driverpay.models.settings import PeriodType
from driverpay.services.pay_settings import DEFAULT_PAY_SETTINGS
from driverpay.services.periods import (
    PeriodRange,
    current_period_range,
    previous_period_range,
    resolve_period,
)


WEEKLY = DEFAULT_PAY_SETTINGS
BIWEEKLY = dataclasses.replace(
    DEFAULT_PAY_SETTINGS,
    period_type=PeriodType.biweekly,
    period_cycle_ref_date=date(2024, 1, 1),
)


def _last_instant(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, 23, 59, 59, 999000)


@pytest.mark.parametrize("offset", range(14))
def test_weekly_period_starts_on_monday(offset):
    now = date(2024, 3, 4) + timedelta(days=offset)
    rng = current_period_range(WEEKLY, now)

    assert rng.start.weekday() == 0
    assert rng.start.time() == datetime.min.time()
    assert rng.start.date() <= now <= rng.end.date()
    assert rng.end == _last_instant(rng.start.date() + timedelta(days=6))


def test_weekly_sunday_belongs_to_week_started_six_days_before():
    rng = current_period_range(WEEKLY, date(2024, 3, 10))
    assert rng.start == datetime(2024, 3, 4)


def test_weekly_ignores_period_start_day():
    settings = dataclasses.replace(WEEKLY, period_start_day=5)
    assert current_period_range(settings, date(2024, 3, 7)).start == datetime(2024, 3, 4)


def test_now_with_time_is_normalized_to_midnight():
    rng = current_period_range(WEEKLY, datetime(2024, 3, 6, 17, 45))
    assert rng.start == datetime(2024, 3, 4)


def test_weekly_previous_is_contiguous_and_non_overlapping():
    current = current_period_range(WEEKLY, date(2024, 3, 6))
    previous = previous_period_range(WEEKLY, current.start)

    assert previous.start == datetime(2024, 2, 26)
    assert previous.end == _last_instant(date(2024, 3, 3))
    assert previous.end < current.start
    assert current.start - previous.end == timedelta(milliseconds=1)


def test_biweekly_anchored_on_reference_date():
    current = current_period_range(BIWEEKLY, date(2024, 1, 20))
    assert current.start == datetime(2024, 1, 15)
    assert current.end == _last_instant(date(2024, 1, 28))

    previous = previous_period_range(BIWEEKLY, current.start)
    assert previous.start == datetime(2024, 1, 1)
    assert previous.end == _last_instant(date(2024, 1, 14))


def test_biweekly_on_reference_date_starts_there():
    rng = current_period_range(BIWEEKLY, date(2024, 1, 1))
    assert rng.start == datetime(2024, 1, 1)
    assert rng.end == _last_instant(date(2024, 1, 14))


def test_biweekly_last_day_of_cycle_stays_in_cycle():
    rng = current_period_range(BIWEEKLY, date(2024, 1, 28))
    assert rng.start == datetime(2024, 1, 15)


def test_biweekly_is_independent_of_calendar_weeks():
    settings = dataclasses.replace(BIWEEKLY, period_cycle_ref_date=date(2024, 1, 3))
    rng = current_period_range(settings, date(2024, 2, 1))
    assert rng.start == datetime(2024, 1, 31)
    assert rng.start.weekday() == 2


def test_biweekly_before_reference_counts_forward_from_reference():
    settings = dataclasses.replace(BIWEEKLY, period_cycle_ref_date=date(2024, 1, 15))
    rng = current_period_range(settings, date(2024, 1, 10))
    assert rng.start == datetime(2024, 1, 15)


def test_biweekly_without_reference_falls_back_to_weekly():
    settings = dataclasses.replace(BIWEEKLY, period_cycle_ref_date=None)
    current = current_period_range(settings, date(2024, 1, 20))
    assert current.start == datetime(2024, 1, 15)
    assert current.end == _last_instant(date(2024, 1, 21))


def test_biweekly_previous_steps_back_two_weeks_without_reference():
    settings = dataclasses.replace(BIWEEKLY, period_cycle_ref_date=None)
    previous = previous_period_range(settings, datetime(2024, 1, 15))
    assert previous.start == datetime(2024, 1, 1)
    assert previous.end == _last_instant(date(2024, 1, 14))


def test_previous_accepts_arbitrary_start():
    previous = previous_period_range(BIWEEKLY, date(2023, 6, 17))
    assert previous.start == datetime(2023, 6, 3)
    assert previous.end == _last_instant(date(2023, 6, 16))


def test_range_contains_is_inclusive():
    rng = PeriodRange(start=datetime(2024, 1, 15), end=_last_instant(date(2024, 1, 28)))
    assert rng.contains(date(2024, 1, 15))
    assert rng.contains(date(2024, 1, 28))
    assert not rng.contains(date(2024, 1, 14))
    assert not rng.contains(date(2024, 1, 29))


def test_resolve_period():
    assert resolve_period(BIWEEKLY, "current", date(2024, 1, 20)).start == datetime(2024, 1, 15)
    assert resolve_period(BIWEEKLY, "previous", date(2024, 1, 20)).start == datetime(2024, 1, 1)
    with pytest.raises(ValueError):
        resolve_period(BIWEEKLY, "next", date(2024, 1, 20))
