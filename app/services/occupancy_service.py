# app/services/occupancy_service.py
"""
Occupancy ledger — which plate is parked in which space, and since when.
A row with exit_time NULL is an active visit; a plate has at most one.
Like the space inventory, these helpers flush but never commit.
"""

from datetime import datetime
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.space import Space
from app.models.vehicle import ParkedVehicle
from app.services.exceptions import AlreadyParkedError, NotParkedError


def get_active_record(db: Session, plate_number: str):
    return (
        db.query(ParkedVehicle)
        .filter(ParkedVehicle.plate_number == plate_number, ParkedVehicle.exit_time.is_(None))
        .first()
    )


def open_record(db: Session, plate_number: str, has_package: bool, space_id: int,
                entry_time: datetime) -> ParkedVehicle:
    """Start a visit. Raises AlreadyParkedError if the plate is already inside."""
    if get_active_record(db, plate_number):
        raise AlreadyParkedError(f"Vehicle {plate_number} is already parked")

    record = ParkedVehicle(
        plate_number=plate_number,
        has_package=has_package,
        entry_time=entry_time,
        space_id=space_id,
    )
    db.add(record)
    try:
        db.flush()
    except IntegrityError:
        # Another process opened a visit for this plate first (partial unique index)
        raise AlreadyParkedError(f"Vehicle {plate_number} is already parked")
    return record


def close_active_record(db: Session, plate_number: str, exit_time: datetime) -> ParkedVehicle:
    """End the plate's active visit. Raises NotParkedError if there is none."""
    record = get_active_record(db, plate_number)
    if not record:
        raise NotParkedError(f"No active parking record for {plate_number}")
    record.exit_time = exit_time
    db.flush()
    return record


def active_records(db: Session):
    """Currently parked vehicles with their space code, latest arrival first."""
    rows = (
        db.query(ParkedVehicle, Space.code)
        .outerjoin(Space, ParkedVehicle.space_id == Space.id)
        .filter(ParkedVehicle.exit_time.is_(None))
        .order_by(ParkedVehicle.entry_time.desc(), ParkedVehicle.id.desc())
        .all()
    )
    return [
        {
            "id": vehicle.id,
            "plate_number": vehicle.plate_number,
            "has_package": vehicle.has_package,
            "entry_time": vehicle.entry_time,
            "space_id": vehicle.space_id,
            "space_code": code,
        }
        for vehicle, code in rows
    ]


def active_count(db: Session) -> int:
    return (
        db.query(func.count(ParkedVehicle.id))
        .filter(ParkedVehicle.exit_time.is_(None))
        .scalar()
    ) or 0
