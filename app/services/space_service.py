# app/services/space_service.py
"""
Space inventory — the fixed pool of parking spaces and their status changes.

Nothing here commits. The parking engine calls these helpers inside its own
transaction and commits once the whole entry/exit/reservation step succeeded.

Allowed status changes:
  available → occupied    (mark_occupied, entry flow)
  occupied  → available   (mark_available, exit flow)
  available ⇄ reserved    (set_reservation, operator toggle)
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.space import (
    Space,
    TYPE_NORMAL,
    TYPE_PACKAGE,
    STATUS_AVAILABLE,
    STATUS_OCCUPIED,
    STATUS_RESERVED,
)
from app.services.exceptions import InvalidTransition, SpaceNotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)

RESERVATION_STATUSES = (STATUS_AVAILABLE, STATUS_RESERVED)


def space_code(prefix: str, number: int) -> str:
    return f"{prefix}-{number:03d}"


def seed_spaces(db: Session, total: int, package_count: int, prefix: str = "A") -> int:
    """
    Create the space pool if the table is empty. The first `package_count`
    spaces are package-type. Returns the number of spaces created (0 when
    the pool already exists).
    """
    existing = db.query(func.count(Space.id)).scalar()
    if existing:
        return 0

    for number in range(1, total + 1):
        db.add(Space(
            code=space_code(prefix, number),
            type=TYPE_PACKAGE if number <= package_count else TYPE_NORMAL,
            status=STATUS_AVAILABLE,
        ))
    db.flush()
    logger.info(f"[Spaces] Seeded {total} spaces ({package_count} package)")
    return total


def get_space(db: Session, space_id: int) -> Space:
    space = db.query(Space).filter(Space.id == space_id).first()
    if not space:
        raise SpaceNotFoundError(f"Space {space_id} not found")
    return space


def list_spaces(db: Session):
    return db.query(Space).order_by(Space.id).all()


def _first_available(db: Session, space_type: Optional[str] = None) -> Optional[Space]:
    q = db.query(Space).filter(Space.status == STATUS_AVAILABLE)
    if space_type:
        q = q.filter(Space.type == space_type)
    # FOR UPDATE is a no-op on SQLite; the engine lock covers that case
    return q.order_by(Space.id).with_for_update().first()


def find_available(db: Session, prefer_type: Optional[str] = None) -> Optional[Space]:
    """
    Pick the space for an arriving vehicle, lowest id first.
    With prefer_type="package" a free package space wins; otherwise, or if
    none is free, any free space. None means the lot is full.
    """
    if prefer_type == TYPE_PACKAGE:
        space = _first_available(db, TYPE_PACKAGE)
        if space:
            return space
    return _first_available(db)


def mark_occupied(db: Session, space_id: int) -> Space:
    space = get_space(db, space_id)
    if space.status != STATUS_AVAILABLE:
        raise InvalidTransition(f"Space {space.code} is {space.status}, cannot mark occupied")
    space.status = STATUS_OCCUPIED
    db.flush()
    return space


def mark_available(db: Session, space_id: int) -> Space:
    space = get_space(db, space_id)
    if space.status != STATUS_OCCUPIED:
        raise InvalidTransition(f"Space {space.code} is {space.status}, cannot release")
    space.status = STATUS_AVAILABLE
    db.flush()
    return space


def set_reservation(db: Session, space_id: int, status: str) -> Space:
    """
    Operator toggle between available and reserved. Occupied spaces are
    refused; only the entry/exit flow may change them.
    """
    if status not in RESERVATION_STATUSES:
        raise InvalidTransition(f"Reservation status must be one of {RESERVATION_STATUSES}, got {status!r}")

    space = get_space(db, space_id)
    if space.status == STATUS_OCCUPIED:
        raise InvalidTransition(f"Space {space.code} is occupied and cannot be set to {status}")

    if space.status != status:
        logger.info(f"[Spaces] {space.code}: {space.status} → {status}")
        space.status = status
        db.flush()
    return space


def count_by_status(db: Session) -> dict:
    """{status: count} for every status, zero-filled."""
    counts = {STATUS_AVAILABLE: 0, STATUS_OCCUPIED: 0, STATUS_RESERVED: 0}
    rows = db.query(Space.status, func.count(Space.id)).group_by(Space.status).all()
    for status, count in rows:
        counts[status] = count
    return counts
