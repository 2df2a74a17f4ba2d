from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from driverpay.models.settings import PeriodType
from driverpay.services.pay_settings import PaySettings


CYCLE_DAYS = {PeriodType.weekly: 7, PeriodType.biweekly: 14}

_END_OF_DAY = time(23, 59, 59, 999000)


@dataclass(frozen=True)
class PeriodRange:
    start: datetime
    end: datetime

    def contains(self, day) -> bool:
        """True when `day` (a date, or the date part of a datetime) falls inside the range."""
        if isinstance(day, datetime):
            day = day.date()
        moment = datetime.combine(day, time.min)
        return self.start <= moment <= self.end

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()


def _midnight(value) -> datetime:
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)


def _end_of(day: datetime) -> datetime:
    return datetime.combine(day.date(), _END_OF_DAY)


def effective_period_type(settings: PaySettings) -> PeriodType:
    """Biweekly cycles need an anchor date; without one the weekly rules apply."""
    if settings.period_type == PeriodType.biweekly and settings.period_cycle_ref_date is not None:
        return PeriodType.biweekly
    return PeriodType.weekly


def current_period_range(settings: PaySettings, now=None) -> PeriodRange:
    today = _midnight(now if now is not None else datetime.now())

    if effective_period_type(settings) == PeriodType.biweekly:
        ref = _midnight(settings.period_cycle_ref_date)
        elapsed_days = math.ceil(abs((today - ref).total_seconds()) / 86400)
        cycles = elapsed_days // CYCLE_DAYS[PeriodType.biweekly]
        start = ref + timedelta(days=cycles * CYCLE_DAYS[PeriodType.biweekly])
        end = _end_of(start + timedelta(days=CYCLE_DAYS[PeriodType.biweekly] - 1))
        return PeriodRange(start=start, end=end)

    # Weekly periods always start on Monday; period_start_day is not consulted.
    start = today - timedelta(days=today.weekday())
    end = _end_of(start + timedelta(days=6))
    return PeriodRange(start=start, end=end)


def previous_period_range(settings: PaySettings, current_start) -> PeriodRange:
    start_day = _midnight(current_start)
    # Steps back by the configured cycle even when the current range fell back to weekly.
    cycle = CYCLE_DAYS[settings.period_type]
    return PeriodRange(
        start=start_day - timedelta(days=cycle),
        end=_end_of(start_day - timedelta(days=1)),
    )


def resolve_period(settings: PaySettings, which: str, now=None) -> PeriodRange:
    """Range for "current" or "previous" relative to `now`."""
    current = current_period_range(settings, now)
    if which == "current":
        return current
    if which == "previous":
        return previous_period_range(settings, current.start)
    raise ValueError(f"Unknown period: {which}")
