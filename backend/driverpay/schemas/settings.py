from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from driverpay.models.settings import PaymentType, PeriodType


class SettingsIn(BaseModel):
    payment_type: PaymentType = PaymentType.hourly

    hourly_rate_weekday: float = Field(ge=0)
    hourly_rate_saturday: float = Field(ge=0)
    hourly_rate_sunday: float = Field(ge=0)
    daily_rate_weekday: float = Field(ge=0)
    daily_rate_saturday: float = Field(ge=0)
    daily_rate_sunday: float = Field(ge=0)

    is_guaranteed_day: bool = True
    min_hours_guaranteed: float = Field(default=8.0, ge=0)
    overtime_start_hours: float = Field(default=10.0, ge=0)
    overtime_rate_multiplier: float = Field(default=1.5, ge=0)

    period_type: PeriodType = PeriodType.weekly
    period_start_day: int = Field(default=1, ge=0, le=7)
    period_cycle_ref_date: dt.date | None = None


class SettingsOut(SettingsIn):
    is_default: bool = False
