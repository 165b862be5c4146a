# app/schemas/whitelist.py
from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional


class WhitelistCreate(BaseModel):
    plate_number: str
    notes: Optional[str] = None

    @field_validator("plate_number")
    @classmethod
    def plate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("plate_number must not be empty")
        return value


class WhitelistEntryOut(BaseModel):
    id: int
    plate_number: str
    created_at: datetime
    notes: Optional[str]

    class Config:
        from_attributes = True
