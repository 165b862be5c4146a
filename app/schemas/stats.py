# app/schemas/stats.py
from pydantic import BaseModel


class StatsOut(BaseModel):
    total_spaces: int
    occupied_spaces: int
    reserved_spaces: int
    available_spaces: int
    total_revenue: float
    whitelist_count: int
    active_vehicles: int
