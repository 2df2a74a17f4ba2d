from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta

from driverpay.models.settings import PaymentType
from driverpay.services.pay_settings import PaySettings


_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def round2(value: float) -> float:
    """Round to the nearest 0.01 with halves rounding up."""
    return math.floor(value * 100 + 0.5) / 100


def _parse_date(value) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except ValueError:
        return None


def _parse_time(value) -> time | None:
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(str(value), fmt).time()
        except ValueError:
            continue
    return None


def compute_duration(shift_date, start_time, end_time) -> float:
    """Hours between start and end, wrapping past midnight when end < start.

    Returns 0 when any input is missing or cannot be parsed.
    """
    day = _parse_date(shift_date)
    start_t = _parse_time(start_time)
    end_t = _parse_time(end_time)
    if day is None or start_t is None or end_t is None:
        return 0

    start = datetime.combine(day, start_t)
    end = datetime.combine(day, end_t)
    if end < start:
        end += timedelta(days=1)

    minutes = (end - start).total_seconds() / 60
    return round2(minutes / 60)


def shift_duration(shift) -> float:
    return compute_duration(
        getattr(shift, "date", None),
        getattr(shift, "start_time", None),
        getattr(shift, "end_time", None),
    )


def _day_rates(day: date, weekday: float, saturday: float, sunday: float) -> float:
    # date.weekday(): Monday == 0 ... Saturday == 5, Sunday == 6
    dow = day.weekday()
    if dow == 5:
        return saturday
    if dow == 6:
        return sunday
    return weekday


def compute_earnings(shift, settings: PaySettings) -> float:
    """Estimated pay for one shift under `settings`.

    `shift` only needs `date`, `start_time` and `end_time` attributes, so ORM
    rows and request payloads both work.
    """
    day = _parse_date(getattr(shift, "date", None))
    start_t = _parse_time(getattr(shift, "start_time", None))
    end_t = _parse_time(getattr(shift, "end_time", None))
    if day is None or start_t is None or end_t is None:
        return 0

    hours = shift_duration(shift)
    guaranteed_short = settings.is_guaranteed_day and hours < settings.min_hours_guaranteed

    if settings.payment_type == PaymentType.daily:
        earnings = _day_rates(
            day,
            settings.daily_rate_weekday,
            settings.daily_rate_saturday,
            settings.daily_rate_sunday,
        )
        if not guaranteed_short and hours > settings.overtime_start_hours:
            # Daily-rate overtime is always priced off the weekday hourly rate.
            ot_hours = hours - settings.overtime_start_hours
            earnings += ot_hours * (settings.hourly_rate_weekday * settings.overtime_rate_multiplier)
    else:
        rate = _day_rates(
            day,
            settings.hourly_rate_weekday,
            settings.hourly_rate_saturday,
            settings.hourly_rate_sunday,
        )
        earnings = hours * rate

        if hours > settings.overtime_start_hours:
            ot_hours = hours - settings.overtime_start_hours
            earnings += ot_hours * (rate * settings.overtime_rate_multiplier - rate)

        if guaranteed_short:
            earnings += (settings.min_hours_guaranteed - hours) * rate

    return round2(earnings)


def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}£{abs(amount):,.2f}"
