"""Unit tests for the package whitelist registry."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime
from app.models.whitelist_entry import WhitelistEntry
from app.services.exceptions import DuplicateError
from app.services.whitelist_service import (
    add_to_whitelist,
    is_whitelisted,
    list_whitelist,
    remove_from_whitelist,
    whitelist_count,
)


class TestWhitelistService:
    def test_added_plate_is_whitelisted(self, db):
        add_to_whitelist(db, "粤B88888", "VIP visitor")
        assert is_whitelisted(db, "粤B88888")
        assert not is_whitelisted(db, "粤B00000")

    def test_duplicate_add_raises_and_keeps_one_row(self, db):
        add_to_whitelist(db, "京A00001", "partner")
        with pytest.raises(DuplicateError):
            add_to_whitelist(db, "京A00001", "second try")

        assert whitelist_count(db) == 1
        assert list_whitelist(db)[0].notes == "partner"

    def test_remove_twice_is_not_an_error(self, db):
        add_to_whitelist(db, "沪C66666")
        assert remove_from_whitelist(db, "沪C66666") is True
        assert remove_from_whitelist(db, "沪C66666") is False
        assert not is_whitelisted(db, "沪C66666")

    def test_remove_unknown_plate(self, db):
        assert remove_from_whitelist(db, "NEVER-ADDED") is False

    def test_list_is_newest_first(self, db):
        db.add(WhitelistEntry(plate_number="OLD-1", created_at=datetime(2026, 1, 1)))
        db.add(WhitelistEntry(plate_number="NEW-1", created_at=datetime(2026, 2, 1)))
        db.add(WhitelistEntry(plate_number="MID-1", created_at=datetime(2026, 1, 15)))
        db.commit()

        plates = [e.plate_number for e in list_whitelist(db)]
        assert plates == ["NEW-1", "MID-1", "OLD-1"]
