from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session, selectinload

from driverpay.api.deps import get_current_user, get_pay_settings
from driverpay.core.config import get_settings
from driverpay.db.session import get_db
from driverpay.models.shift import Route, Shift
from driverpay.models.user import User
from driverpay.schemas.shifts import ShiftDefaultsOut, ShiftDeleteOut, ShiftIn, ShiftOut, SuggestionsOut
from driverpay.services.pay_settings import PaySettings
from driverpay.services.periods import resolve_period
from driverpay.services.shifts import apply_shift_payload, new_shift_defaults, vehicle_suggestions
from driverpay.services.summary import price_shift


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shifts")


def _get_shift_or_404(db: Session, shift_id: int, current: User) -> Shift:
    # Other users' shifts are reported as missing rather than forbidden.
    shift = db.query(Shift).filter(Shift.id == shift_id, Shift.user_id == current.id).first()
    if shift is None:
        raise HTTPException(status_code=404, detail="Shift not found")
    return shift


def _user_shifts(db: Session, current: User):
    return (
        db.query(Shift)
        .options(selectinload(Shift.routes).selectinload(Route.stops))
        .filter(Shift.user_id == current.id)
    )


@router.get("", response_model=list[ShiftOut])
def list_shifts(
    period: str = Query("all", pattern="^(all|current|previous)$"),
    on: dt.date | None = Query(None),
    limit: int | None = Query(None, ge=1, le=1000),
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
    db: Session = Depends(get_db),
):
    q = _user_shifts(db, current)
    if period != "all":
        rng = resolve_period(pay, period, on)
        q = q.filter(Shift.date >= rng.start_date, Shift.date <= rng.end_date)

    shifts = q.order_by(Shift.date.desc(), Shift.id.desc()).limit(limit or get_settings().shift_list_limit).all()
    return [ShiftOut.from_priced(price_shift(s, pay)) for s in shifts]


@router.get("/suggestions", response_model=SuggestionsOut)
def get_suggestions(current: User = Depends(get_current_user), db: Session = Depends(get_db)):
    trucks, trailers = vehicle_suggestions(db, current.id)
    return SuggestionsOut(truck_regs=trucks, trailer_ids=trailers)


@router.get("/defaults", response_model=ShiftDefaultsOut)
def get_defaults(current: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return ShiftDefaultsOut(**new_shift_defaults(db, current))


@router.post("", response_model=ShiftOut)
def create_shift(
    payload: ShiftIn,
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
    db: Session = Depends(get_db),
):
    shift = apply_shift_payload(Shift(user_id=current.id), payload)
    db.add(shift)
    db.commit()
    db.refresh(shift)
    logger.info("Created shift id=%s for user id=%s (%d routes)", shift.id, current.id, len(shift.routes))

    return ShiftOut.from_priced(price_shift(shift, pay))


@router.get("/{shift_id}", response_model=ShiftOut)
def get_shift_detail(
    shift_id: int,
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
    db: Session = Depends(get_db),
):
    shift = _get_shift_or_404(db, shift_id, current)
    return ShiftOut.from_priced(price_shift(shift, pay))


@router.put("/{shift_id}", response_model=ShiftOut)
def replace_shift(
    shift_id: int,
    payload: ShiftIn,
    current: User = Depends(get_current_user),
    pay: PaySettings = Depends(get_pay_settings),
    db: Session = Depends(get_db),
):
    shift = _get_shift_or_404(db, shift_id, current)
    apply_shift_payload(shift, payload)
    db.add(shift)
    db.commit()
    db.refresh(shift)
    logger.info("Replaced shift id=%s for user id=%s", shift.id, current.id)

    return ShiftOut.from_priced(price_shift(shift, pay))


@router.delete("/{shift_id}", response_model=ShiftDeleteOut)
def delete_shift(
    shift_id: int,
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    shift = _get_shift_or_404(db, shift_id, current)
    db.delete(shift)
    db.commit()
    logger.info("Deleted shift id=%s for user id=%s", shift_id, current.id)

    return ShiftDeleteOut(deleted=True)
