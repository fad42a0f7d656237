"""Period formatting and parsing.

This module provides functions for converting periods to and from
string representations:
    - ISO 8601 duration formatting and parsing
    - Human-readable formatting with pluralized unit names

Functions:
    format_period: Format a Period as an ISO 8601 duration string.
    parse_period: Parse an ISO 8601 duration string.
    format_human: Format a Period as text like "1 year, 2 months".

Examples:
    >>> from isoperiod import Period
    >>> from isoperiod.format import format_human, format_period, parse_period

    >>> p = parse_period("P1Y2M3DT4H")
    >>> format_period(p)
    'P1Y2M3DT4H'
    >>> format_human(p)
    '1 year, 2 months, 3 days, 4 hours'
"""

from __future__ import annotations

from isoperiod.format.human import DEFAULT_PERIOD_NAMES, PeriodNames, format_human
from isoperiod.format.iso8601 import format_period, parse_period
from isoperiod.format.plural import Case, Plurals

__all__: list[str] = [
    # ISO 8601
    "format_period",
    "parse_period",
    # Human-readable
    "format_human",
    "PeriodNames",
    "DEFAULT_PERIOD_NAMES",
    # Plurals
    "Case",
    "Plurals",
]
