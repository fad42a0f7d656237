"""PeriodUnit enumeration for the components of a period.

This module provides the PeriodUnit enum naming the seven units a period
is written in, and how each maps onto Period's fixed-point storage.
"""

from __future__ import annotations

from enum import Enum

from isoperiod._internal.constants import (
    MILLI_DAYS_PER_DAY,
    MILLI_DAYS_PER_WEEK,
    MILLI_MONTHS_PER_MONTH,
    MILLI_MONTHS_PER_YEAR,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)

# Names of the three Period storage fields
MONTHS_FIELD = "milli_months"
DAYS_FIELD = "milli_days"
TIME_FIELD = "milliseconds"


class PeriodUnit(Enum):
    """Units of a period, in the order they are written.

    Each unit belongs to exactly one storage field. Years and months share
    the months field; weeks and days share the days field; hours, minutes
    and seconds share the milliseconds field.

    Examples:
        >>> PeriodUnit.YEAR.scale
        12000
        >>> PeriodUnit.WEEK.field
        'milli_days'
        >>> PeriodUnit.MINUTE.designator
        'M'
        >>> PeriodUnit.MINUTE.is_time
        True
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def field(self) -> str:
        """Return the name of the Period storage field holding this unit."""
        fields: dict[PeriodUnit, str] = {
            PeriodUnit.YEAR: MONTHS_FIELD,
            PeriodUnit.MONTH: MONTHS_FIELD,
            PeriodUnit.WEEK: DAYS_FIELD,
            PeriodUnit.DAY: DAYS_FIELD,
            PeriodUnit.HOUR: TIME_FIELD,
            PeriodUnit.MINUTE: TIME_FIELD,
            PeriodUnit.SECOND: TIME_FIELD,
        }
        return fields[self]

    @property
    def scale(self) -> int:
        """Return the number of storage units in one of this unit."""
        scales: dict[PeriodUnit, int] = {
            PeriodUnit.YEAR: MILLI_MONTHS_PER_YEAR,
            PeriodUnit.MONTH: MILLI_MONTHS_PER_MONTH,
            PeriodUnit.WEEK: MILLI_DAYS_PER_WEEK,
            PeriodUnit.DAY: MILLI_DAYS_PER_DAY,
            PeriodUnit.HOUR: MILLIS_PER_HOUR,
            PeriodUnit.MINUTE: MILLIS_PER_MINUTE,
            PeriodUnit.SECOND: MILLIS_PER_SECOND,
        }
        return scales[self]

    @property
    def designator(self) -> str:
        """Return the ISO 8601 designator letter.

        Note: MONTH and MINUTE share 'M'; the 'T' separator tells them apart.
        """
        return self.name[0]

    @property
    def is_time(self) -> bool:
        """Return True for units written after the 'T' separator."""
        return self.field == TIME_FIELD

    @property
    def plural(self) -> str:
        """Return the plural English name, e.g. 'years'."""
        return self.value + "s"


DATE_UNITS: tuple[PeriodUnit, ...] = tuple(u for u in PeriodUnit if not u.is_time)
TIME_UNITS: tuple[PeriodUnit, ...] = tuple(u for u in PeriodUnit if u.is_time)


__all__ = [
    "PeriodUnit",
    "DATE_UNITS",
    "TIME_UNITS",
    "MONTHS_FIELD",
    "DAYS_FIELD",
    "TIME_FIELD",
]
