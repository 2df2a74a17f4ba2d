from __future__ import annotations

import datetime as dt

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from driverpay.models.base import Base


class Shift(Base):
    __tablename__ = "shifts"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    date: Mapped[dt.date] = mapped_column(Date, index=True)

    # Raw inputs. Earnings and hours are derived on read from the current settings.
    start_time: Mapped[dt.time | None] = mapped_column(Time, default=None)
    end_time: Mapped[dt.time | None] = mapped_column(Time, default=None)
    start_km: Mapped[float] = mapped_column(Float, default=0.0)
    end_km: Mapped[float] = mapped_column(Float, default=0.0)
    truck_reg: Mapped[str] = mapped_column(String(32), default="")
    trailer_id: Mapped[str] = mapped_column(String(32), default="")
    refuel: Mapped[bool] = mapped_column(Boolean, default=False)
    notes: Mapped[str] = mapped_column(Text, default="")

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)

    routes: Mapped[list["Route"]] = relationship(
        back_populates="shift",
        cascade="all, delete-orphan",
        order_by="Route.sequence_order",
    )


class Route(Base):
    __tablename__ = "routes"

    id: Mapped[int] = mapped_column(primary_key=True)
    shift_id: Mapped[int] = mapped_column(ForeignKey("shifts.id", ondelete="CASCADE"), index=True)
    sequence_order: Mapped[int] = mapped_column(Integer, default=1)

    shift: Mapped[Shift] = relationship(back_populates="routes")
    stops: Mapped[list["Stop"]] = relationship(
        back_populates="route",
        cascade="all, delete-orphan",
        order_by="Stop.sequence_order",
    )


class Stop(Base):
    __tablename__ = "stops"

    id: Mapped[int] = mapped_column(primary_key=True)
    route_id: Mapped[int] = mapped_column(ForeignKey("routes.id", ondelete="CASCADE"), index=True)
    store_number: Mapped[str] = mapped_column(String(32), default="")
    location_name: Mapped[str] = mapped_column(String(200), default="")
    cages_delivered: Mapped[int] = mapped_column(Integer, default=0)
    cages_returned: Mapped[int] = mapped_column(Integer, default=0)
    sequence_order: Mapped[int] = mapped_column(Integer, default=1)

    route: Mapped[Route] = relationship(back_populates="stops")
