# app/models/parking_log.py
"""
Entry/exit event log — append-only history used for the recent-activity
view and revenue reporting. Written by the parking engine only.
"""

from sqlalchemy import Column, Integer, String, DateTime, Float
from app.database import Base

ACTION_ENTRY = "entry"
ACTION_EXIT = "exit"


class ParkingLog(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plate_number = Column(String(50), nullable=False, index=True)
    action = Column(String(10), nullable=False)        # entry | exit
    timestamp = Column(DateTime, nullable=False, index=True)
    amount = Column(Float, default=0, nullable=False)  # 0 for entries and package vehicles
    duration_half_days = Column(Integer, default=0, nullable=False)

    def __repr__(self):
        return f"<ParkingLog {self.id} plate={self.plate_number} action={self.action} amount={self.amount}>"
