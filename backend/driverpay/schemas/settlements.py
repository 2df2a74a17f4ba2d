from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SettlementIn(BaseModel):
    start_date: dt.date
    end_date: dt.date
    actual_amount: float = Field(default=0.0)
    note: str = ""

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class SettlementOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    start_date: dt.date
    end_date: dt.date
    actual_amount: float
    note: str
