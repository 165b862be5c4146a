# app/routers/whitelist.py
"""Package whitelist — list, add, remove."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.whitelist import WhitelistCreate, WhitelistEntryOut
from app.services.whitelist_service import add_to_whitelist, list_whitelist, remove_from_whitelist

router = APIRouter()


@router.get("/whitelist", response_model=list[WhitelistEntryOut], summary="List package plates")
def get_whitelist(db: Session = Depends(get_db)):
    return list_whitelist(db)


@router.post("/whitelist", summary="Add a package plate")
def add_plate(body: WhitelistCreate, db: Session = Depends(get_db)):
    """400 if the plate is already listed."""
    add_to_whitelist(db, body.plate_number, body.notes)
    return {"status": "added", "plate": body.plate_number}


@router.delete("/whitelist/{plate}", summary="Remove a package plate")
def remove_plate(plate: str, db: Session = Depends(get_db)):
    """Idempotent — removing an unknown plate still succeeds."""
    removed = remove_from_whitelist(db, plate)
    return {"status": "removed", "plate": plate, "removed": removed}
