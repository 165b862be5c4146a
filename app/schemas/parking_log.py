# app/schemas/parking_log.py
from pydantic import BaseModel
from datetime import datetime


class ParkingLogOut(BaseModel):
    id: int
    plate_number: str
    action: str                 # entry | exit
    timestamp: datetime
    amount: float
    duration_half_days: int

    class Config:
        from_attributes = True
