"""Isoperiod: exact calendar-aware periods with ISO 8601 and readable output.

A Period is an elapsed time such as "1 year, 2 months and 3.5 days". It
keeps months and days apart from hours, minutes and seconds, and stores
everything as fixed-point integers, so printing never drifts.

Core Types:
    Period: Calendar-aware elapsed time (years through seconds)

Units:
    PeriodUnit: The seven period units (YEAR through SECOND)

Format Functions:
    parse_period: Parse an ISO 8601 duration string
    format_period: Format a Period as an ISO 8601 duration string
    format_human: Format a Period as text like "1 year, 2 months"

Names:
    Plurals: Plural-form templates for one unit
    PeriodNames: Plurals for all seven units

Exceptions:
    PeriodError: Base exception
    ValidationError: Invalid component values
    ParseError: Failed to parse string

Example:
    >>> from isoperiod import Period
    >>> p = Period.parse("P1Y2M3W4DT5H6M7.5S")
    >>> str(p)
    'P1Y2M25DT5H6M7.5S'
    >>> p.format()
    '1 year, 2 months, 25 days, 5 hours, 6 minutes, 7.5 seconds'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from isoperiod.core.period import Period

# Units
from isoperiod.units.periodunit import PeriodUnit

# Exceptions
from isoperiod.errors import ParseError, PeriodError, ValidationError

# Format functions
from isoperiod.format import (
    DEFAULT_PERIOD_NAMES,
    PeriodNames,
    Plurals,
    format_human,
    format_period,
    parse_period,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Period",
    # Units
    "PeriodUnit",
    # Exceptions
    "PeriodError",
    "ValidationError",
    "ParseError",
    # Format functions
    "parse_period",
    "format_period",
    "format_human",
    # Names
    "Plurals",
    "PeriodNames",
    "DEFAULT_PERIOD_NAMES",
]
