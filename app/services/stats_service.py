# app/services/stats_service.py
"""Dashboard aggregates — space counts, whitelist size, revenue."""

from sqlalchemy.orm import Session
from app.models.space import STATUS_AVAILABLE, STATUS_OCCUPIED, STATUS_RESERVED
from app.schemas.stats import StatsOut
from app.services.event_log_service import total_revenue
from app.services.occupancy_service import active_count
from app.services.space_service import count_by_status
from app.services.whitelist_service import whitelist_count


def get_stats(db: Session) -> StatsOut:
    counts = count_by_status(db)
    total = sum(counts.values())
    return StatsOut(
        total_spaces=total,
        occupied_spaces=counts[STATUS_OCCUPIED],
        reserved_spaces=counts[STATUS_RESERVED],
        available_spaces=counts[STATUS_AVAILABLE],
        total_revenue=total_revenue(db),
        whitelist_count=whitelist_count(db),
        active_vehicles=active_count(db),
    )
