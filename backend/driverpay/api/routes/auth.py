from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from driverpay.api.deps import get_current_user
from driverpay.core.security import create_access_token, hash_password, verify_password
from driverpay.db.session import get_db
from driverpay.models.user import User
from driverpay.schemas.auth import MeOut, ProfileUpdateIn, RegisterIn, TokenOut


logger = logging.getLogger(__name__)


def _normalize_login(value: str) -> str:
    normalized = (value or "").strip().lower()
    if not normalized:
        raise HTTPException(status_code=422, detail="Email is required")
    return normalized


router = APIRouter(prefix="/auth")


@router.post("/register", response_model=TokenOut)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    email = _normalize_login(payload.email)
    existing = db.query(User).filter(User.email == email).first()
    if existing is not None:
        raise HTTPException(status_code=400, detail="Email is already in use")

    user = User(
        email=email,
        full_name=payload.full_name,
        password_hash=hash_password(payload.password),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)

    return TokenOut(access_token=create_access_token(subject=str(user.id)))


@router.post("/login", response_model=TokenOut)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    email = _normalize_login(form_data.username)
    user = db.query(User).filter(User.email == email).first()
    if user is None or not user.is_active:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    if not verify_password(form_data.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return TokenOut(access_token=create_access_token(subject=str(user.id)))


@router.get("/me", response_model=MeOut)
def me(current: User = Depends(get_current_user)):
    return MeOut.model_validate(current)


@router.patch("/me", response_model=MeOut)
def update_profile(payload: ProfileUpdateIn, current: User = Depends(get_current_user), db: Session = Depends(get_db)):
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(current, field, value)
    db.add(current)
    db.commit()
    db.refresh(current)
    return MeOut.model_validate(current)
