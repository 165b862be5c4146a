# app/services/entry_exit_service.py
"""
Parking engine — entry, exit and the reservation toggle.

How it works:
  - Entry: whitelist check → pick a space (package space first for package
    plates) → open a ledger record → mark the space occupied → log the entry
  - Exit: close the plate's active record → bill started half-days (package
    plates bill 0) → free the space → log the exit with amount
  - Reservation toggle: operator flips a space between available/reserved

Each operation runs under one process-wide lock and in one DB transaction.
Any error rolls the whole step back, so a failed entry never leaves a space
occupied without a ledger record (or the other way round).
"""

import threading
from contextlib import contextmanager
from datetime import datetime
from fastapi import Request
from app.models.parking_log import ACTION_ENTRY, ACTION_EXIT
from app.models.space import TYPE_PACKAGE
from app.schemas.gate import EntryResult, ExitResult
from app.schemas.space import SpaceOut
from app.services import space_service
from app.services.billing import compute_half_days, compute_fee
from app.services.event_log_service import append_event
from app.services.exceptions import AlreadyParkedError, LotFullError, ParkingError
from app.services.occupancy_service import close_active_record, get_active_record, open_record
from app.services.whitelist_service import is_whitelisted
from app.utils.logger import get_logger

logger = get_logger(__name__)


class ParkingEngine:
    """
    Owns the write path for spaces, the occupancy ledger and the event log.
    Build one per process and share it; the lock only serializes callers
    that go through the same instance.
    """

    def __init__(self, session_factory, clock=datetime.utcnow):
        self._session_factory = session_factory
        self._clock = clock
        self._lock = threading.Lock()

    @contextmanager
    def _unit_of_work(self, operation: str):
        with self._lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except ParkingError as e:
                db.rollback()
                logger.warning(f"[{operation}] Rejected: {e.message}")
                raise
            except Exception:
                db.rollback()
                logger.error(f"[{operation}] Failed, transaction rolled back", exc_info=True)
                raise
            finally:
                db.close()

    def entry(self, plate_number: str) -> EntryResult:
        with self._unit_of_work("Entry") as db:
            now = self._clock()
            has_package = is_whitelisted(db, plate_number)

            if get_active_record(db, plate_number):
                raise AlreadyParkedError(f"Vehicle {plate_number} is already parked")

            space = space_service.find_available(db, prefer_type=TYPE_PACKAGE if has_package else None)
            if space is None:
                raise LotFullError("Parking lot is full, no space available")

            open_record(db, plate_number, has_package, space.id, now)
            space_service.mark_occupied(db, space.id)
            append_event(db, plate_number, ACTION_ENTRY, now)

            result = EntryResult(
                plate_number=plate_number,
                space_id=space.id,
                space_code=space.code,
                has_package=has_package,
                entry_time=now,
            )

        logger.info(f"[Entry] Plate={plate_number} | Space={result.space_code} | Package={has_package}")
        return result

    def exit(self, plate_number: str) -> ExitResult:
        with self._unit_of_work("Exit") as db:
            now = self._clock()
            record = close_active_record(db, plate_number, now)

            duration = now - record.entry_time
            if duration.total_seconds() < 0:
                logger.warning(f"[Exit] Plate={plate_number} exit is before entry ({duration}), billing 0")
            half_days = compute_half_days(duration)
            # has_package comes from the entry snapshot, not the current whitelist
            amount = compute_fee(half_days, record.has_package)

            space_service.mark_available(db, record.space_id)
            append_event(db, plate_number, ACTION_EXIT, now, amount=amount, half_days=half_days)

            result = ExitResult(
                plate_number=plate_number,
                space_id=record.space_id,
                amount=amount,
                duration_half_days=half_days,
                has_package=record.has_package,
                entry_time=record.entry_time,
                exit_time=now,
            )

        logger.info(f"[Exit] Plate={plate_number} | HalfDays={half_days} | Amount={amount}")
        return result

    def set_reservation(self, space_id: int, status: str) -> SpaceOut:
        """Operator toggle, serialized with entry/exit so it cannot race an assignment."""
        with self._unit_of_work("Reservation") as db:
            space = space_service.set_reservation(db, space_id, status)
            result = SpaceOut.model_validate(space)
        return result


def get_parking_engine(request: Request) -> ParkingEngine:
    """FastAPI dependency — the engine built at startup."""
    return request.app.state.parking_engine
