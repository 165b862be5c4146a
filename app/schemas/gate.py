# app/schemas/gate.py
from pydantic import BaseModel, field_validator
from datetime import datetime


class PlateRequest(BaseModel):
    """Body for POST /gate/entry and POST /gate/exit."""
    plate_number: str

    @field_validator("plate_number")
    @classmethod
    def plate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("plate_number must not be empty")
        return value


class EntryResult(BaseModel):
    plate_number: str
    space_id: int
    space_code: str
    has_package: bool
    entry_time: datetime


class ExitResult(BaseModel):
    plate_number: str
    space_id: int
    amount: float
    duration_half_days: int
    has_package: bool
    entry_time: datetime
    exit_time: datetime
