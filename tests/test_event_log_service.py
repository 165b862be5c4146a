"""Unit tests for the entry/exit event log."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime, timedelta
from app.services.event_log_service import append_event, recent_events, total_revenue

T0 = datetime(2026, 2, 27, 8, 0, 0)


class TestEventLog:
    def test_empty_log_has_zero_revenue(self, db):
        assert total_revenue(db) == 0
        assert recent_events(db) == []

    def test_revenue_sums_all_amounts(self, db):
        append_event(db, "A1", "entry", T0)
        append_event(db, "A1", "exit", T0 + timedelta(hours=13), amount=40, half_days=2)
        append_event(db, "B2", "exit", T0 + timedelta(hours=14), amount=20, half_days=1)
        db.commit()
        assert total_revenue(db) == 60

    def test_recent_is_newest_first_and_bounded(self, db):
        for i in range(5):
            append_event(db, f"P{i}", "entry", T0 + timedelta(minutes=i))
        db.commit()

        events = recent_events(db, limit=3)
        assert [e.plate_number for e in events] == ["P4", "P3", "P2"]

    def test_entry_defaults(self, db):
        entry = append_event(db, "A1", "entry", T0)
        assert entry.amount == 0
        assert entry.duration_half_days == 0

    @pytest.mark.parametrize("plate,action,ts", [
        ("", "entry", T0),
        ("A1", "park", T0),
        ("A1", "exit", None),
    ])
    def test_missing_or_bad_fields_rejected(self, db, plate, action, ts):
        with pytest.raises(ValueError):
            append_event(db, plate, action, ts)
