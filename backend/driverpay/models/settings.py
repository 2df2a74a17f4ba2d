from __future__ import annotations

import enum
from datetime import date

from sqlalchemy import Boolean, Date, Enum, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from driverpay.models.base import Base


class PaymentType(str, enum.Enum):
    hourly = "hourly"
    daily = "daily"


class PeriodType(str, enum.Enum):
    weekly = "weekly"
    biweekly = "biweekly"


class UserSettings(Base):
    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True)

    payment_type: Mapped[PaymentType] = mapped_column(Enum(PaymentType), default=PaymentType.hourly)

    hourly_rate_weekday: Mapped[float] = mapped_column(Float, default=18.50)
    hourly_rate_saturday: Mapped[float] = mapped_column(Float, default=22.00)
    hourly_rate_sunday: Mapped[float] = mapped_column(Float, default=24.00)
    daily_rate_weekday: Mapped[float] = mapped_column(Float, default=160.0)
    daily_rate_saturday: Mapped[float] = mapped_column(Float, default=180.0)
    daily_rate_sunday: Mapped[float] = mapped_column(Float, default=200.0)

    is_guaranteed_day: Mapped[bool] = mapped_column(Boolean, default=True)
    min_hours_guaranteed: Mapped[float] = mapped_column(Float, default=8.0)
    overtime_start_hours: Mapped[float] = mapped_column(Float, default=10.0)
    overtime_rate_multiplier: Mapped[float] = mapped_column(Float, default=1.5)

    period_type: Mapped[PeriodType] = mapped_column(Enum(PeriodType), default=PeriodType.weekly)
    # 1 = Monday. Stored for the settings screen; weekly periods always start on Monday.
    period_start_day: Mapped[int] = mapped_column(Integer, default=1)
    period_cycle_ref_date: Mapped[date | None] = mapped_column(Date, default=None)
