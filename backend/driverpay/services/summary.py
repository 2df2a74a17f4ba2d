from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date

from driverpay.services.earnings import compute_earnings, format_currency, round2, shift_duration
from driverpay.services.pay_settings import PaySettings
from driverpay.services.periods import PeriodRange


@dataclass
class PricedShift:
    shift: object
    total_hours: float
    estimated_earnings: float

    @property
    def date(self) -> date:
        return self.shift.date


@dataclass
class PeriodSummary:
    start: date
    end: date
    shifts: list[PricedShift] = field(default_factory=list)
    shift_count: int = 0
    total_hours: float = 0.0
    estimated_earnings: float = 0.0
    routes: int = 0
    stores: int = 0
    cages_delivered: int = 0
    cages_returned: int = 0
    distance_km: float = 0.0
    average_per_day: float = 0.0
    actual_amount: float | None = None
    difference: float | None = None
    note: str | None = None


def price_shift(shift, settings: PaySettings) -> PricedShift:
    return PricedShift(
        shift=shift,
        total_hours=shift_duration(shift),
        estimated_earnings=compute_earnings(shift, settings),
    )


def percent_change(current: float, previous: float) -> int:
    if previous == 0:
        return 100 if current > 0 else 0
    # Halves round up, so -47.5 becomes -47.
    return math.floor((current - previous) / previous * 100 + 0.5)


def summarize_period(shifts, settings: PaySettings, period: PeriodRange, settlement=None) -> PeriodSummary:
    """Aggregate the shifts falling inside `period`.

    Shifts outside the range are ignored, so callers can pass a user's whole
    recent history. `settlement` is anything with `actual_amount` and `note`.
    """
    priced = [price_shift(s, settings) for s in shifts if s.date is not None and period.contains(s.date)]
    priced.sort(key=lambda p: p.date)

    summary = PeriodSummary(start=period.start_date, end=period.end_date, shifts=priced)
    summary.shift_count = len(priced)

    for p in priced:
        summary.total_hours += p.total_hours
        summary.estimated_earnings += p.estimated_earnings
        summary.distance_km += (p.shift.end_km or 0) - (p.shift.start_km or 0)
        for route in p.shift.routes or []:
            summary.routes += 1
            for stop in route.stops or []:
                summary.stores += 1
                summary.cages_delivered += stop.cages_delivered or 0
                summary.cages_returned += stop.cages_returned or 0

    summary.total_hours = round2(summary.total_hours)
    summary.estimated_earnings = round2(summary.estimated_earnings)
    summary.distance_km = round2(summary.distance_km)
    if summary.shift_count:
        summary.average_per_day = round2(summary.estimated_earnings / summary.shift_count)

    if settlement is not None:
        summary.actual_amount = float(settlement.actual_amount)
        summary.difference = round2(summary.actual_amount - summary.estimated_earnings)
        summary.note = settlement.note or ""

    return summary


def render_period_report(summary: PeriodSummary) -> str:
    """Plain-text period report suitable for pasting into a message."""
    lines = [
        f"REPORT: {summary.start.isoformat()} - {summary.end.isoformat()}",
        f"Estimated: {format_currency(summary.estimated_earnings)}",
    ]
    if summary.actual_amount is not None:
        lines.append(f"Paid: {format_currency(summary.actual_amount)}")
    lines.append(f"Hours: {summary.total_hours:.2f}h")
    lines.append("")

    if not summary.shifts:
        lines.append("No shifts in this period.")
    for p in summary.shifts:
        lines.append(f"{p.date.isoformat()} ({p.total_hours:g}h) - {format_currency(p.estimated_earnings)}")

    return "\n".join(lines) + "\n"
