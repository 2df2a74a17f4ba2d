from __future__ import annotations

from fastapi import APIRouter

from driverpay.api.routes import auth, dashboard, periods, settings, settlements, shifts


api_router = APIRouter(prefix="/api")

api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(settings.router, tags=["settings"])
api_router.include_router(shifts.router, tags=["shifts"])
api_router.include_router(periods.router, tags=["periods"])
api_router.include_router(settlements.router, tags=["settlements"])
api_router.include_router(dashboard.router, tags=["dashboard"])
