# app/services/billing.py
"""
Fee rules. Pure functions, no DB access.

    half_days = ceil(duration / 12h)      (any started half-day counts)
    amount    = 0 for package vehicles, else half_days * UNIT_RATE

A zero-length stay bills 0 half-days. A negative duration (wall clock
moved backwards during the stay) is treated as zero.
"""

import math
from datetime import timedelta
from app.config import settings


def compute_half_days(duration: timedelta, half_day_hours: int = None) -> int:
    hours = half_day_hours or settings.HALF_DAY_HOURS
    seconds = duration.total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / (hours * 3600))


def compute_fee(half_days: int, has_package: bool, unit_rate: int = None) -> int:
    if has_package:
        return 0
    rate = settings.UNIT_RATE if unit_rate is None else unit_rate
    return half_days * rate
