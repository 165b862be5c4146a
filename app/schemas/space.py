# app/schemas/space.py
from pydantic import BaseModel
from typing import Literal


class SpaceOut(BaseModel):
    id: int
    code: str
    status: str     # available | occupied | reserved
    type: str       # normal | package

    class Config:
        from_attributes = True


class ReservationUpdate(BaseModel):
    status: Literal["available", "reserved"]
