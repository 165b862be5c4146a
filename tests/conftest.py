"""Shared fixtures: a fresh SQLite file DB per test with the 50-space pool seeded."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["LOG_TO_FILE"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("API_KEY", None)

import pytest
from datetime import datetime, timedelta
from sqlalchemy.orm import sessionmaker
from app.database import build_engine, init_db
from app.services.entry_exit_service import ParkingEngine


class FakeClock:
    """Callable clock the tests move forward by hand."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'parking.db'}")
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    init_db(session_factory=factory, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 2, 27, 8, 0, 0))


@pytest.fixture
def parking_engine(session_factory, clock):
    return ParkingEngine(session_factory, clock=clock)
