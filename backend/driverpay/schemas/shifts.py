from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class StopIn(BaseModel):
    store_number: str = Field(default="", max_length=32)
    location_name: str = Field(default="", max_length=200)
    cages_delivered: int = Field(default=0, ge=0)
    cages_returned: int = Field(default=0, ge=0)
    sequence_order: int = Field(default=1, ge=1)


class RouteIn(BaseModel):
    sequence_order: int = Field(default=1, ge=1)
    stops: list[StopIn] = Field(default_factory=list)


class ShiftIn(BaseModel):
    date: dt.date
    start_time: dt.time | None = None
    end_time: dt.time | None = None

    start_km: float = 0.0
    end_km: float = 0.0
    truck_reg: str = Field(default="", max_length=32)
    trailer_id: str = Field(default="", max_length=32)
    refuel: bool = False
    notes: str = ""

    routes: list[RouteIn] = Field(default_factory=list)


class StopOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_number: str
    location_name: str
    cages_delivered: int
    cages_returned: int
    sequence_order: int


class RouteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sequence_order: int
    stops: list[StopOut]


class ShiftOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: dt.date
    start_time: dt.time | None
    end_time: dt.time | None

    start_km: float
    end_km: float
    truck_reg: str
    trailer_id: str
    refuel: bool
    notes: str

    routes: list[RouteOut]

    # Derived from the current settings on every read.
    distance_km: float = 0.0
    total_hours: float = 0.0
    estimated_earnings: float = 0.0

    @classmethod
    def from_priced(cls, priced):
        data = cls.model_validate(priced.shift).model_dump()
        data["distance_km"] = round((priced.shift.end_km or 0) - (priced.shift.start_km or 0), 2)
        data["total_hours"] = priced.total_hours
        data["estimated_earnings"] = priced.estimated_earnings
        return cls(**data)


class ShiftDeleteOut(BaseModel):
    deleted: bool


class SuggestionsOut(BaseModel):
    truck_regs: list[str]
    trailer_ids: list[str]


class ShiftDefaultsOut(BaseModel):
    truck_reg: str = ""
    start_km: float | None = None
    end_km: float | None = None
