"""Demo data must respect the same invariants as engine-driven state."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scripts", "setup"))

from datetime import datetime
from seed_demo import seed_demo, WHITELIST, PARKED, HISTORY
from app.services.event_log_service import total_revenue
from app.services.occupancy_service import active_count
from app.services.space_service import count_by_status
from app.services.whitelist_service import whitelist_count


class TestSeedDemo:
    def test_loads_once(self, db):
        now = datetime(2026, 2, 27, 22, 0, 0)
        assert seed_demo(db, now) is True
        assert seed_demo(db, now) is False

        assert whitelist_count(db) == len(WHITELIST)
        assert active_count(db) == len(PARKED)
        assert count_by_status(db)["occupied"] == len(PARKED)
        assert total_revenue(db) == 80
        assert len(HISTORY) == 6

    def test_engine_can_exit_seeded_vehicle(self, db, parking_engine, clock):
        seed_demo(db, clock.now)
        result = parking_engine.exit("川A77777")
        # Entered 8 hours before the seed time
        assert result.duration_half_days == 1
        assert result.amount == 20
