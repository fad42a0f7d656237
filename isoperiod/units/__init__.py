"""Period units.

This module provides:
    - PeriodUnit: the seven units of a period (YEAR through SECOND)
    - DATE_UNITS / TIME_UNITS: the units before and after the 'T' separator
"""

from __future__ import annotations

from isoperiod.units.periodunit import DATE_UNITS, TIME_UNITS, PeriodUnit

__all__: list[str] = [
    "PeriodUnit",
    "DATE_UNITS",
    "TIME_UNITS",
]
