"""Core period type.

This module provides:
    - Period: calendar-aware elapsed time with fixed-point storage
    - Decomposition helpers splitting the storage fields into units
"""

from __future__ import annotations

from isoperiod.core.period import (
    Period,
    split_hours_minutes_seconds,
    split_weeks_days,
    split_years_months,
)

__all__: list[str] = [
    "Period",
    "split_hours_minutes_seconds",
    "split_weeks_days",
    "split_years_months",
]
