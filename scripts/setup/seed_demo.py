# scripts/setup/seed_demo.py
"""
Load demo data for local development: package plates, a few vehicles
already parked and some finished visits in the log.
Skips everything if the ledger already has rows.
Usage: python scripts/setup/seed_demo.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from datetime import datetime, timedelta
from app.database import init_db, SessionLocal
from app.models.parking_log import ParkingLog, ACTION_ENTRY, ACTION_EXIT
from app.models.space import STATUS_OCCUPIED
from app.models.vehicle import ParkedVehicle
from app.models.whitelist_entry import WhitelistEntry
from app.services.space_service import get_space

WHITELIST = [
    ("粤B88888", "VIP visitor - Mr. Zhang"),
    ("京A00001", "Long-term partner travel agency"),
    ("沪C66666", "Scenic area partner"),
    ("浙A12345", "Family package - Ms. Li"),
]

# plate, has_package, space_id, hours since entry
PARKED = [
    ("粤B88888", True, 1, 2),
    ("京A00001", True, 2, 5),
    ("苏E99999", False, 16, 1),
    ("川A77777", False, 17, 8),
]

# plate, action, hours ago, amount, half-days
HISTORY = [
    ("粤B12345", ACTION_ENTRY, 24, 0, 0),
    ("粤B12345", ACTION_EXIT, 12, 20, 1),
    ("京A88888", ACTION_ENTRY, 48, 0, 0),
    ("京A88888", ACTION_EXIT, 36, 40, 2),
    ("沪A66666", ACTION_ENTRY, 10, 0, 0),
    ("沪A66666", ACTION_EXIT, 2, 20, 1),
]


def seed_demo(db, now: datetime) -> bool:
    if db.query(ParkedVehicle).first() or db.query(ParkingLog).first():
        return False

    for plate, notes in WHITELIST:
        db.add(WhitelistEntry(plate_number=plate, notes=notes, created_at=now))

    for plate, has_package, space_id, hours in PARKED:
        entry_time = now - timedelta(hours=hours)
        db.add(ParkedVehicle(plate_number=plate, has_package=has_package,
                             entry_time=entry_time, space_id=space_id))
        get_space(db, space_id).status = STATUS_OCCUPIED
        db.add(ParkingLog(plate_number=plate, action=ACTION_ENTRY, timestamp=entry_time,
                          amount=0, duration_half_days=0))

    for plate, action, hours, amount, half_days in HISTORY:
        db.add(ParkingLog(plate_number=plate, action=action, timestamp=now - timedelta(hours=hours),
                          amount=amount, duration_half_days=half_days))

    db.commit()
    return True


def main():
    init_db()
    db = SessionLocal()
    try:
        if seed_demo(db, datetime.utcnow()):
            print(f"Demo data loaded: {len(WHITELIST)} package plates, "
                  f"{len(PARKED)} parked vehicles, {len(HISTORY)} history rows")
        else:
            print("Ledger is not empty — demo data skipped")
    finally:
        db.close()


if __name__ == "__main__":
    main()
