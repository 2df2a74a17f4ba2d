from __future__ import annotations

import datetime as dt

from pydantic import BaseModel

from driverpay.schemas.shifts import ShiftOut


class PeriodRangeOut(BaseModel):
    start: dt.datetime
    end: dt.datetime
    period_type: str


class PeriodSummaryOut(BaseModel):
    start_date: dt.date
    end_date: dt.date

    shift_count: int
    total_hours: float
    estimated_earnings: float
    routes: int
    stores: int
    cages_delivered: int
    cages_returned: int
    distance_km: float
    average_per_day: float

    actual_amount: float | None = None
    difference: float | None = None
    note: str | None = None

    shifts: list[ShiftOut] = []

    @classmethod
    def from_summary(cls, summary, *, include_shifts: bool = True):
        return cls(
            start_date=summary.start,
            end_date=summary.end,
            shift_count=summary.shift_count,
            total_hours=summary.total_hours,
            estimated_earnings=summary.estimated_earnings,
            routes=summary.routes,
            stores=summary.stores,
            cages_delivered=summary.cages_delivered,
            cages_returned=summary.cages_returned,
            distance_km=summary.distance_km,
            average_per_day=summary.average_per_day,
            actual_amount=summary.actual_amount,
            difference=summary.difference,
            note=summary.note,
            shifts=[ShiftOut.from_priced(p) for p in summary.shifts] if include_shifts else [],
        )


class ChartPoint(BaseModel):
    date: dt.date
    earnings: float


class DashboardOut(BaseModel):
    period_type: str
    current: PeriodSummaryOut
    previous: PeriodSummaryOut
    earnings_change_pct: int
    earnings_display: str
    recent: list[ChartPoint]
