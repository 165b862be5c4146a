# app/models/space.py
"""
Parking spaces table.
A fixed pool created at bootstrap (A-001 … A-050). Spaces are never deleted;
only `status` changes, through the parking engine or the reservation toggle.
"""

from sqlalchemy import Column, Integer, String
from app.database import Base

TYPE_NORMAL = "normal"
TYPE_PACKAGE = "package"

STATUS_AVAILABLE = "available"
STATUS_OCCUPIED = "occupied"
STATUS_RESERVED = "reserved"


class Space(Base):
    __tablename__ = "spaces"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(20), unique=True, nullable=False, index=True)
    status = Column(String(20), default=STATUS_AVAILABLE, nullable=False, index=True)  # available | occupied | reserved
    type = Column(String(20), default=TYPE_NORMAL, nullable=False)  # normal | package

    def __repr__(self):
        return f"<Space {self.code} type={self.type} status={self.status}>"
