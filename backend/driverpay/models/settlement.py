from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Float, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from driverpay.models.base import Base


class PeriodSettlement(Base):
    __tablename__ = "period_settlements"
    __table_args__ = (UniqueConstraint("user_id", "start_date", "end_date", name="uq_settlement_period"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    actual_amount: Mapped[float] = mapped_column(Float, default=0.0)
    note: Mapped[str] = mapped_column(Text, default="")
