# app/services/event_log_service.py
"""
Append-only entry/exit history plus the reporting queries built on it.
Revenue is a full SUM over the log on every call; switch to a running
total if the log is ever left to grow without bound.
"""

from datetime import datetime
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.parking_log import ParkingLog, ACTION_ENTRY, ACTION_EXIT


def append_event(db: Session, plate_number: str, action: str, timestamp: datetime,
                 amount: float = 0, half_days: int = 0) -> ParkingLog:
    if not plate_number:
        raise ValueError("plate_number is required")
    if action not in (ACTION_ENTRY, ACTION_EXIT):
        raise ValueError(f"action must be '{ACTION_ENTRY}' or '{ACTION_EXIT}', got {action!r}")
    if timestamp is None:
        raise ValueError("timestamp is required")

    entry = ParkingLog(
        plate_number=plate_number,
        action=action,
        timestamp=timestamp,
        amount=amount,
        duration_half_days=half_days,
    )
    db.add(entry)
    db.flush()
    return entry


def recent_events(db: Session, limit: int = 50):
    """Newest-first window of the log."""
    return (
        db.query(ParkingLog)
        .order_by(ParkingLog.timestamp.desc(), ParkingLog.id.desc())
        .limit(limit)
        .all()
    )


def total_revenue(db: Session) -> float:
    return db.query(func.sum(ParkingLog.amount)).scalar() or 0
