from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from driverpay.core.security import decode_token
from driverpay.db.session import get_db
from driverpay.models.settings import UserSettings
from driverpay.models.user import User
from driverpay.services.pay_settings import PaySettings


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    try:
        payload = decode_token(token)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token")

    sub = payload.get("sub")
    if not sub:
        raise HTTPException(status_code=401, detail="Invalid token")

    user = db.query(User).filter(User.id == int(sub)).first()
    if user is None or not user.is_active:
        raise HTTPException(status_code=401, detail="User not found or inactive")

    return user


def get_settings_record(current: User = Depends(get_current_user), db: Session = Depends(get_db)) -> UserSettings | None:
    return db.query(UserSettings).filter(UserSettings.user_id == current.id).first()


def get_pay_settings(record: UserSettings | None = Depends(get_settings_record)) -> PaySettings:
    # No stored record means the documented defaults.
    return PaySettings.from_record(record)
