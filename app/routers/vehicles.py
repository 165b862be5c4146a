# app/routers/vehicles.py
"""Vehicles currently in the lot."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.vehicle import ActiveVehicleOut
from app.services.occupancy_service import active_records

router = APIRouter()


@router.get("/vehicles", response_model=list[ActiveVehicleOut], summary="Currently parked vehicles")
def list_active_vehicles(db: Session = Depends(get_db)):
    """Active visits joined with their space code, latest arrival first."""
    return active_records(db)
