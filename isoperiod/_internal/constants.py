"""Internal constants for isoperiod.

These constants define the fixed-point scales used by the Period storage
fields. This module is not part of the public API.
"""

from __future__ import annotations

# Fixed-point scale of the months and days fields (thousandths)
THOUSANDTHS: int = 1_000

# Months field: thousandths of a calendar month
MILLI_MONTHS_PER_MONTH: int = THOUSANDTHS
MILLI_MONTHS_PER_YEAR: int = 12 * MILLI_MONTHS_PER_MONTH  # 12_000

# Days field: thousandths of a day
MILLI_DAYS_PER_DAY: int = THOUSANDTHS
MILLI_DAYS_PER_WEEK: int = 7 * MILLI_DAYS_PER_DAY  # 7_000

# Time field: milliseconds
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE  # 3_600_000
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

# Approximate month length used for timedelta conversion:
# 365.2425 days / 12 = 30.436875 days = 2_629_746 seconds
SECONDS_PER_APPROX_MONTH: int = 2_629_746

# Milliseconds per unit of each fixed-point field
MILLIS_PER_MILLI_MONTH: int = SECONDS_PER_APPROX_MONTH  # exact: s * 1000 / 1000
MILLIS_PER_MILLI_DAY: int = MILLIS_PER_DAY // MILLI_DAYS_PER_DAY  # 86_400


__all__ = [
    "THOUSANDTHS",
    "MILLI_MONTHS_PER_MONTH",
    "MILLI_MONTHS_PER_YEAR",
    "MILLI_DAYS_PER_DAY",
    "MILLI_DAYS_PER_WEEK",
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "SECONDS_PER_APPROX_MONTH",
    "MILLIS_PER_MILLI_MONTH",
    "MILLIS_PER_MILLI_DAY",
]
