from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from driverpay.api.deps import get_current_user
from driverpay.db.session import get_db
from driverpay.models.settlement import PeriodSettlement
from driverpay.models.user import User
from driverpay.schemas.settlements import SettlementIn, SettlementOut


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settlements")


def _find(db: Session, user_id: int, start_date: dt.date, end_date: dt.date) -> PeriodSettlement | None:
    return (
        db.query(PeriodSettlement)
        .filter(
            PeriodSettlement.user_id == user_id,
            PeriodSettlement.start_date == start_date,
            PeriodSettlement.end_date == end_date,
        )
        .first()
    )


@router.get("", response_model=list[SettlementOut])
def list_settlements(current: User = Depends(get_current_user), db: Session = Depends(get_db)):
    rows = (
        db.query(PeriodSettlement)
        .filter(PeriodSettlement.user_id == current.id)
        .order_by(PeriodSettlement.start_date.desc())
        .all()
    )
    return [SettlementOut.model_validate(r) for r in rows]


@router.get("/lookup", response_model=SettlementOut)
def get_settlement(
    start_date: dt.date = Query(...),
    end_date: dt.date = Query(...),
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = _find(db, current.id, start_date, end_date)
    if row is None:
        raise HTTPException(status_code=404, detail="Settlement not found")
    return SettlementOut.model_validate(row)


@router.put("", response_model=SettlementOut)
def upsert_settlement(payload: SettlementIn, current: User = Depends(get_current_user), db: Session = Depends(get_db)):
    # One settlement per (user, start_date, end_date); saving again overwrites.
    row = _find(db, current.id, payload.start_date, payload.end_date)
    if row is None:
        row = PeriodSettlement(user_id=current.id, start_date=payload.start_date, end_date=payload.end_date)

    row.actual_amount = payload.actual_amount
    row.note = payload.note
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("Saved settlement id=%s for user id=%s (%s..%s)", row.id, current.id, row.start_date, row.end_date)

    return SettlementOut.model_validate(row)
