# app/schemas/vehicle.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class ActiveVehicleOut(BaseModel):
    id: int
    plate_number: str
    has_package: bool
    entry_time: datetime
    space_id: int
    space_code: Optional[str]
