from __future__ import annotations

from sqlalchemy.orm import Session

from driverpay.models.shift import Route, Shift, Stop
from driverpay.models.user import User
from driverpay.schemas.shifts import RouteIn, ShiftIn


SUGGESTION_LOOKBACK = 100


def build_routes(routes: list[RouteIn]) -> list[Route]:
    out: list[Route] = []
    for r in routes:
        route = Route(sequence_order=r.sequence_order)
        route.stops = [
            Stop(
                store_number=s.store_number,
                location_name=s.location_name,
                cages_delivered=s.cages_delivered,
                cages_returned=s.cages_returned,
                sequence_order=s.sequence_order,
            )
            for s in r.stops
        ]
        out.append(route)
    return out


def apply_shift_payload(shift: Shift, payload: ShiftIn) -> Shift:
    """Overwrite every field of `shift` and swap its whole route set.

    Old routes and stops are removed by the delete-orphan cascade when the
    caller commits, so the replace happens in a single transaction.
    """
    shift.date = payload.date
    shift.start_time = payload.start_time
    shift.end_time = payload.end_time
    shift.start_km = payload.start_km
    shift.end_km = payload.end_km
    shift.truck_reg = payload.truck_reg
    shift.trailer_id = payload.trailer_id
    shift.refuel = payload.refuel
    shift.notes = payload.notes
    shift.routes = build_routes(payload.routes)
    return shift


def vehicle_suggestions(db: Session, user_id: int) -> tuple[list[str], list[str]]:
    rows = (
        db.query(Shift.truck_reg, Shift.trailer_id)
        .filter(Shift.user_id == user_id)
        .order_by(Shift.date.desc(), Shift.id.desc())
        .limit(SUGGESTION_LOOKBACK)
        .all()
    )

    trucks: list[str] = []
    trailers: list[str] = []
    for truck_reg, trailer_id in rows:
        if truck_reg and truck_reg not in trucks:
            trucks.append(truck_reg)
        if trailer_id and trailer_id not in trailers:
            trailers.append(trailer_id)
    return trucks, trailers


def new_shift_defaults(db: Session, user: User) -> dict:
    defaults: dict = {"truck_reg": user.default_truck_reg or "", "start_km": None, "end_km": None}

    last_end_km = (
        db.query(Shift.end_km)
        .filter(Shift.user_id == user.id)
        .order_by(Shift.date.desc(), Shift.id.desc())
        .limit(1)
        .scalar()
    )
    if last_end_km is not None:
        defaults["start_km"] = last_end_km
        defaults["end_km"] = last_end_km
    return defaults
