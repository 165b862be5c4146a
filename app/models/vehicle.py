# app/models/vehicle.py
"""
Occupancy ledger table — one row per parking visit.
exit_time IS NULL marks the vehicle as currently parked. Rows are closed on
exit, never deleted. has_package is a snapshot of whitelist membership taken
at entry and is what exit billing uses.
"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.database import Base


class ParkedVehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plate_number = Column(String(50), nullable=False, index=True)
    has_package = Column(Boolean, default=False, nullable=False)
    entry_time = Column(DateTime, nullable=False)
    exit_time = Column(DateTime)               # NULL while parked
    space_id = Column(Integer, ForeignKey("spaces.id"), nullable=False)

    space = relationship("Space")

    __table_args__ = (
        # One active visit per plate
        Index(
            "uq_vehicles_active_plate",
            "plate_number",
            unique=True,
            sqlite_where=exit_time.is_(None),
            postgresql_where=exit_time.is_(None),
        ),
    )

    @property
    def is_active(self) -> bool:
        return self.exit_time is None

    def __repr__(self):
        return f"<ParkedVehicle {self.plate_number} space={self.space_id} active={self.is_active}>"
