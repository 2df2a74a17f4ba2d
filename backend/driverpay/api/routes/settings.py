from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from driverpay.api.deps import get_current_user, get_settings_record
from driverpay.db.session import get_db
from driverpay.models.settings import UserSettings
from driverpay.models.user import User
from driverpay.schemas.settings import SettingsIn, SettingsOut
from driverpay.services.pay_settings import DEFAULT_PAY_SETTINGS, PaySettings


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings")


@router.get("", response_model=SettingsOut)
def get_user_settings(record: UserSettings | None = Depends(get_settings_record)):
    if record is None:
        return SettingsOut(**DEFAULT_PAY_SETTINGS.as_dict(), is_default=True)
    return SettingsOut(**PaySettings.from_record(record).as_dict(), is_default=False)


@router.put("", response_model=SettingsOut)
def save_user_settings(
    payload: SettingsIn,
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    record = db.query(UserSettings).filter(UserSettings.user_id == current.id).first()
    if record is None:
        record = UserSettings(user_id=current.id)

    for field, value in payload.model_dump().items():
        setattr(record, field, value)

    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Saved settings for user id=%s (payment_type=%s, period_type=%s)", current.id, record.payment_type.value, record.period_type.value)

    return SettingsOut(**PaySettings.from_record(record).as_dict(), is_default=False)
