from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date

from driverpay.models.settings import PaymentType, PeriodType


@dataclass(frozen=True)
class PaySettings:
    """Immutable pay policy used by every calculation.

    All fields are mandatory. A user without a stored settings record gets
    DEFAULT_PAY_SETTINGS via `from_record(None)`.
    """

    payment_type: PaymentType
    hourly_rate_weekday: float
    hourly_rate_saturday: float
    hourly_rate_sunday: float
    daily_rate_weekday: float
    daily_rate_saturday: float
    daily_rate_sunday: float
    is_guaranteed_day: bool
    min_hours_guaranteed: float
    overtime_start_hours: float
    overtime_rate_multiplier: float
    period_type: PeriodType
    period_start_day: int = 1
    period_cycle_ref_date: date | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "payment_type", PaymentType(self.payment_type))
        object.__setattr__(self, "period_type", PeriodType(self.period_type))

        for name in (
            "hourly_rate_weekday",
            "hourly_rate_saturday",
            "hourly_rate_sunday",
            "daily_rate_weekday",
            "daily_rate_saturday",
            "daily_rate_sunday",
            "min_hours_guaranteed",
            "overtime_start_hours",
            "overtime_rate_multiplier",
        ):
            value = getattr(self, name)
            if value is None or value < 0:
                raise ValueError(f"{name} must be a non-negative number")

    @classmethod
    def from_record(cls, record) -> PaySettings:
        """Build from a `UserSettings` row (or anything with the same attributes)."""
        if record is None:
            return DEFAULT_PAY_SETTINGS
        return cls(**{f.name: getattr(record, f.name) for f in fields(cls)})

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_PAY_SETTINGS = PaySettings(
    payment_type=PaymentType.hourly,
    hourly_rate_weekday=18.50,
    hourly_rate_saturday=22.00,
    hourly_rate_sunday=24.00,
    daily_rate_weekday=160.0,
    daily_rate_saturday=180.0,
    daily_rate_sunday=200.0,
    is_guaranteed_day=True,
    min_hours_guaranteed=8.0,
    overtime_start_hours=10.0,
    overtime_rate_multiplier=1.5,
    period_type=PeriodType.weekly,
    period_start_day=1,
    period_cycle_ref_date=None,
)
