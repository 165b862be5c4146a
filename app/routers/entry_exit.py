# app/routers/entry_exit.py
"""Gate endpoints (entry/exit) and the entry/exit log viewer."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.schemas.gate import PlateRequest, EntryResult, ExitResult
from app.schemas.parking_log import ParkingLogOut
from app.services.entry_exit_service import ParkingEngine, get_parking_engine
from app.services.event_log_service import recent_events

router = APIRouter()


@router.post("/gate/entry", response_model=EntryResult, summary="Vehicle entry — assign a space")
def vehicle_entry(body: PlateRequest, engine: ParkingEngine = Depends(get_parking_engine)):
    """
    Package plates get a package space when one is free, otherwise any free space.
    400 when the lot is full, 409 when the plate is already inside.
    """
    return engine.entry(body.plate_number)


@router.post("/gate/exit", response_model=ExitResult, summary="Vehicle exit — compute fee and free the space")
def vehicle_exit(body: PlateRequest, engine: ParkingEngine = Depends(get_parking_engine)):
    """Bills 20 per started half-day (0 for package plates). 404 when the plate is not parked."""
    return engine.exit(body.plate_number)


@router.get("/logs", response_model=list[ParkingLogOut], summary="Recent entry/exit log")
def get_logs(limit: int = Query(settings.RECENT_LOG_LIMIT, ge=1, le=500), db: Session = Depends(get_db)):
    """Newest-first entry/exit events with amounts and billed half-days."""
    return recent_events(db, limit=limit)
