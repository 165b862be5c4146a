# app/database.py
"""
Database connection, session management, table creation and the space seed.
Uses SQLAlchemy; SQLite by default, PostgreSQL via DATABASE_URL. All models
are imported in create_tables() so one call creates every table.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings


def build_engine(url: str):
    """Create an engine with pool options suited to the backend in the URL."""
    if url.startswith("sqlite"):
        # Route handlers run in a thread pool; SQLite must allow that
        return create_engine(url, connect_args={"check_same_thread": False}, echo=False)
    return create_engine(
        url,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        pool_size=10,
        max_overflow=20,
        echo=False,                  # Set True to log all SQL queries (debug only)
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """
    Creates all DB tables. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from app.models.space import Space                     # noqa
    from app.models.whitelist_entry import WhitelistEntry  # noqa
    from app.models.vehicle import ParkedVehicle           # noqa
    from app.models.parking_log import ParkingLog          # noqa

    Base.metadata.create_all(bind=bind or engine)


def init_db(session_factory=None, bind=None):
    """Create tables and seed the fixed space pool if it is empty."""
    from app.services.space_service import seed_spaces

    create_tables(bind=bind)
    db = (session_factory or SessionLocal)()
    try:
        created = seed_spaces(
            db,
            total=settings.TOTAL_SPACES,
            package_count=settings.PACKAGE_SPACES,
            prefix=settings.SPACE_CODE_PREFIX,
        )
        db.commit()
        return created
    finally:
        db.close()
