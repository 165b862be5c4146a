# app/models/whitelist_entry.py
"""
Package whitelist table.
Plates listed here get package treatment (package space first, no fee).
Managed by operators; the engine only reads it.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from app.database import Base


class WhitelistEntry(Base):
    __tablename__ = "package_whitelist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plate_number = Column(String(50), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    notes = Column(Text)

    def __repr__(self):
        return f"<WhitelistEntry {self.plate_number}>"
