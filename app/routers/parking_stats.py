# app/routers/parking_stats.py
"""Dashboard aggregates."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.stats import StatsOut
from app.services.stats_service import get_stats

router = APIRouter()


@router.get("/stats", response_model=StatsOut, summary="Space counts, whitelist size, total revenue")
def get_dashboard_stats(db: Session = Depends(get_db)):
    return get_stats(db)
