# app/services/whitelist_service.py
"""
Package whitelist registry — lookup, add, remove, list.
Read by the parking engine at entry time; written by operators only.
"""

from datetime import datetime
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.whitelist_entry import WhitelistEntry
from app.services.exceptions import DuplicateError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def lookup_whitelist_entry(db: Session, plate_number: str):
    """Find a whitelist entry by plate number. Returns None if not found."""
    return db.query(WhitelistEntry).filter(WhitelistEntry.plate_number == plate_number).first()


def is_whitelisted(db: Session, plate_number: str) -> bool:
    """Check if a plate number holds a package."""
    return lookup_whitelist_entry(db, plate_number) is not None


def add_to_whitelist(db: Session, plate_number: str, notes: str = None) -> WhitelistEntry:
    """
    Register a package plate. Raises DuplicateError if the plate is already
    listed; nothing is left in the session in that case.
    """
    if lookup_whitelist_entry(db, plate_number):
        raise DuplicateError(f"Plate {plate_number} is already on the package whitelist")

    entry = WhitelistEntry(plate_number=plate_number, notes=notes, created_at=datetime.utcnow())
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same plate
        db.rollback()
        raise DuplicateError(f"Plate {plate_number} is already on the package whitelist")

    logger.info(f"[Whitelist] Added {plate_number} ({notes or 'no notes'})")
    return entry


def remove_from_whitelist(db: Session, plate_number: str) -> bool:
    """Remove a plate. Removing an unknown plate is not an error; returns whether a row went away."""
    removed = db.query(WhitelistEntry).filter(WhitelistEntry.plate_number == plate_number).delete()
    db.commit()
    if removed:
        logger.info(f"[Whitelist] Removed {plate_number}")
    return bool(removed)


def list_whitelist(db: Session):
    """All whitelist entries, newest first."""
    return (
        db.query(WhitelistEntry)
        .order_by(WhitelistEntry.created_at.desc(), WhitelistEntry.id.desc())
        .all()
    )


def whitelist_count(db: Session) -> int:
    return db.query(func.count(WhitelistEntry.id)).scalar() or 0
