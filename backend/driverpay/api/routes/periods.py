from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session, selectinload

from driverpay.api.deps import get_current_user, get_pay_settings
from driverpay.db.session import get_db
from driverpay.models.settlement import PeriodSettlement
from driverpay.models.shift import Route, Shift
from driverpay.models.user import User
from driverpay.schemas.periods import PeriodRangeOut, PeriodSummaryOut
from driverpay.services.pay_settings import PaySettings
from driverpay.services.periods import (
    PeriodRange,
    current_period_range,
    effective_period_type,
    previous_period_range,
    resolve_period,
)
from driverpay.services.summary import PeriodSummary, render_period_report, summarize_period


router = APIRouter(prefix="/periods")


def build_period_summary(db: Session, current: User, pay: PaySettings, rng: PeriodRange) -> PeriodSummary:
    shifts = (
        db.query(Shift)
        .options(selectinload(Shift.routes).selectinload(Route.stops))
        .filter(Shift.user_id == current.id)
        .filter(Shift.date >= rng.start_date, Shift.date <= rng.end_date)
        .all()
    )
    settlement = (
        db.query(PeriodSettlement)
        .filter(
            PeriodSettlement.user_id == current.id,
            PeriodSettlement.start_date == rng.start_date,
            PeriodSettlement.end_date == rng.end_date,
        )
        .first()
    )
    return summarize_period(shifts, pay, rng, settlement)


def _range_out(pay: PaySettings, rng: PeriodRange) -> PeriodRangeOut:
    return PeriodRangeOut(start=rng.start, end=rng.end, period_type=effective_period_type(pay).value)


@router.get("/current", response_model=PeriodRangeOut)
def get_current_period(
    on: dt.date | None = Query(None),
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
):
    return _range_out(pay, current_period_range(pay, on))


@router.get("/previous", response_model=PeriodRangeOut)
def get_previous_period(
    start: dt.date | None = Query(None, description="Start of the period to step back from"),
    on: dt.date | None = Query(None),
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
):
    if start is None:
        start = current_period_range(pay, on).start
    return _range_out(pay, previous_period_range(pay, start))


@router.get("/summary", response_model=PeriodSummaryOut)
def get_period_summary(
    period: str = Query("current", pattern="^(current|previous)$"),
    on: dt.date | None = Query(None),
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
    db: Session = Depends(get_db),
):
    rng = resolve_period(pay, period, on)
    return PeriodSummaryOut.from_summary(build_period_summary(db, current, pay, rng))


@router.get("/report", response_class=PlainTextResponse)
def get_period_report(
    period: str = Query("current", pattern="^(current|previous)$"),
    on: dt.date | None = Query(None),
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
    db: Session = Depends(get_db),
):
    rng = resolve_period(pay, period, on)
    summary = build_period_summary(db, current, pay, rng)
    return PlainTextResponse(render_period_report(summary))
