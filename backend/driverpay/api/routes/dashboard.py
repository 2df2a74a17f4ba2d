from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from driverpay.api.deps import get_current_user, get_pay_settings
from driverpay.api.routes.periods import build_period_summary
from driverpay.db.session import get_db
from driverpay.models.shift import Shift
from driverpay.models.user import User
from driverpay.schemas.periods import ChartPoint, DashboardOut, PeriodSummaryOut
from driverpay.services.earnings import compute_earnings, format_currency
from driverpay.services.pay_settings import PaySettings
from driverpay.services.periods import current_period_range, effective_period_type, previous_period_range
from driverpay.services.summary import percent_change


CHART_POINTS = 10

router = APIRouter(prefix="/dashboard")


@router.get("", response_model=DashboardOut)
def get_dashboard(
    on: dt.date | None = Query(None),
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
    db: Session = Depends(get_db),
):
    current_rng = current_period_range(pay, on)
    previous_rng = previous_period_range(pay, current_rng.start)

    this_period = build_period_summary(db, current, pay, current_rng)
    last_period = build_period_summary(db, current, pay, previous_rng)

    recent = (
        db.query(Shift)
        .filter(Shift.user_id == current.id)
        .order_by(Shift.date.desc(), Shift.id.desc())
        .limit(CHART_POINTS)
        .all()
    )
    chart = [ChartPoint(date=s.date, earnings=compute_earnings(s, pay)) for s in reversed(recent)]

    return DashboardOut(
        period_type=effective_period_type(pay).value,
        current=PeriodSummaryOut.from_summary(this_period, include_shifts=False),
        previous=PeriodSummaryOut.from_summary(last_period, include_shifts=False),
        earnings_change_pct=percent_change(this_period.estimated_earnings, last_period.estimated_earnings),
        earnings_display=format_currency(this_period.estimated_earnings),
        recent=chart,
    )
