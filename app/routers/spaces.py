# app/routers/spaces.py
"""Space list + manual reservation toggle."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.space import SpaceOut, ReservationUpdate
from app.services.entry_exit_service import ParkingEngine, get_parking_engine
from app.services.space_service import list_spaces

router = APIRouter()


@router.get("/spaces", response_model=list[SpaceOut], summary="All spaces with status and type")
def get_spaces(db: Session = Depends(get_db)):
    return list_spaces(db)


@router.post("/spaces/{space_id}/reservation", response_model=SpaceOut, summary="Reserve or release a space")
def set_space_reservation(space_id: int, body: ReservationUpdate,
                          engine: ParkingEngine = Depends(get_parking_engine)):
    """
    Flip a space between available and reserved.
    Occupied spaces are refused with 409; unknown ids give 404.
    """
    return engine.set_reservation(space_id, body.status)
