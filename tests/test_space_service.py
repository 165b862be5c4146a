"""Unit tests for the space inventory."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from app.models.space import Space
from app.services import space_service
from app.services.exceptions import InvalidTransition, SpaceNotFoundError


def set_status(db, status, type_=None):
    q = db.query(Space)
    if type_:
        q = q.filter(Space.type == type_)
    q.update({Space.status: status})
    db.commit()


class TestSeed:
    def test_pool_layout(self, db):
        spaces = space_service.list_spaces(db)
        assert len(spaces) == 50
        assert spaces[0].code == "A-001"
        assert spaces[-1].code == "A-050"
        assert [s.type for s in spaces].count("package") == 15
        assert all(s.type == "package" for s in spaces[:15])
        assert all(s.status == "available" for s in spaces)

    def test_seed_is_idempotent(self, db):
        assert space_service.seed_spaces(db, total=50, package_count=15) == 0
        assert len(space_service.list_spaces(db)) == 50


class TestFindAvailable:
    def test_package_preference_picks_package_space(self, db):
        space = space_service.find_available(db, prefer_type="package")
        assert space.type == "package"
        assert space.code == "A-001"

    def test_no_preference_picks_lowest_id(self, db):
        set_status(db, "occupied", "package")
        space = space_service.find_available(db)
        assert space.code == "A-016"

    def test_no_preference_can_take_package_space(self, db):
        assert space_service.find_available(db).code == "A-001"

    def test_package_falls_back_to_normal(self, db):
        set_status(db, "occupied", "package")
        space = space_service.find_available(db, prefer_type="package")
        assert space.type == "normal"
        assert space.code == "A-016"

    def test_reserved_spaces_are_skipped(self, db):
        space_service.set_reservation(db, 1, "reserved")
        db.commit()
        assert space_service.find_available(db, prefer_type="package").code == "A-002"

    def test_full_lot_returns_none(self, db):
        set_status(db, "occupied")
        assert space_service.find_available(db) is None
        assert space_service.find_available(db, prefer_type="package") is None


class TestTransitions:
    def test_occupy_then_release(self, db):
        assert space_service.mark_occupied(db, 3).status == "occupied"
        assert space_service.mark_available(db, 3).status == "available"

    def test_occupy_twice_raises(self, db):
        space_service.mark_occupied(db, 3)
        with pytest.raises(InvalidTransition):
            space_service.mark_occupied(db, 3)

    def test_release_free_space_raises(self, db):
        with pytest.raises(InvalidTransition):
            space_service.mark_available(db, 3)

    def test_occupy_reserved_space_raises(self, db):
        space_service.set_reservation(db, 3, "reserved")
        with pytest.raises(InvalidTransition):
            space_service.mark_occupied(db, 3)

    def test_unknown_space(self, db):
        with pytest.raises(SpaceNotFoundError):
            space_service.mark_occupied(db, 999)


class TestReservation:
    def test_reserve_and_release(self, db):
        assert space_service.set_reservation(db, 20, "reserved").status == "reserved"
        assert space_service.set_reservation(db, 20, "available").status == "available"

    def test_same_status_is_noop(self, db):
        assert space_service.set_reservation(db, 20, "available").status == "available"

    def test_occupied_space_is_refused(self, db):
        space_service.mark_occupied(db, 20)
        with pytest.raises(InvalidTransition):
            space_service.set_reservation(db, 20, "reserved")
        with pytest.raises(InvalidTransition):
            space_service.set_reservation(db, 20, "available")
        assert space_service.get_space(db, 20).status == "occupied"

    def test_bad_target_status(self, db):
        with pytest.raises(InvalidTransition):
            space_service.set_reservation(db, 20, "occupied")

    def test_unknown_space(self, db):
        with pytest.raises(SpaceNotFoundError):
            space_service.set_reservation(db, 999, "reserved")

    def test_count_by_status(self, db):
        space_service.mark_occupied(db, 1)
        space_service.set_reservation(db, 2, "reserved")
        assert space_service.count_by_status(db) == {"available": 48, "occupied": 1, "reserved": 1}
