"""Isoperiod exception hierarchy.

All isoperiod-specific exceptions inherit from PeriodError.
"""

from __future__ import annotations


class PeriodError(Exception):
    """Base exception for all isoperiod errors."""

    pass


class ValidationError(PeriodError):
    """Invalid component values.

    Raised when a period cannot be built from the values given.

    Examples:
        - A month count finer than thousandths (0.0001 months)
        - Seconds finer than milliseconds (1.0005 seconds)
        - Components with mixed signs (1 day and -1 hour)
    """

    pass


class ParseError(PeriodError):
    """Failed to parse a textual representation.

    Raised when a string or JSON payload cannot be read as a period.

    Examples:
        - Missing 'P' designator
        - Designators out of order (P1D2Y)
        - Empty period (P, PT)
    """

    pass


__all__ = [
    "PeriodError",
    "ValidationError",
    "ParseError",
]
