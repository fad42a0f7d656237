"""ISO 8601 duration formatting and parsing.

This module provides functions for converting periods to and from the
ISO 8601 duration representation.

Functions:
    format_period: Format a Period as an ISO 8601 duration string.
    parse_period: Parse an ISO 8601 duration string into a Period.

Format grammar:
    [-]P[nY][nM][nW|nD][T[nH][nM][nS]]

    - Zero components are left out; the zero period is written "P0D".
    - The days field is written in weeks ("W") when it is a whole number
      of weeks, and in days ("D") otherwise. The two are never mixed.
    - Months, days, weeks and seconds may carry a decimal fraction of up
      to three digits; years, hours and minutes are always whole.

Parsing is more lenient than formatting: a leading "+" is accepted, the
fraction separator may be "." or ",", lower-case designators are
accepted, and "W" may appear together with "D" (the two are added).

Examples:
    >>> from isoperiod import Period
    >>> from isoperiod.format import format_period, parse_period

    >>> format_period(Period(years=1, months=1.5))
    'P1Y1.5M'

    >>> format_period(Period(days=14))
    'P2W'

    >>> parse_period("-PT1H30M")
    Period.from_fields(0, 0, -5400000)
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from isoperiod._internal.constants import MILLI_DAYS_PER_WEEK
from isoperiod._internal.numeric import render_thousandths
from isoperiod._internal.validation import to_fixed_point
from isoperiod.errors import ParseError, ValidationError
from isoperiod.units.periodunit import (
    DATE_UNITS,
    DAYS_FIELD,
    MONTHS_FIELD,
    TIME_FIELD,
    TIME_UNITS,
    PeriodUnit,
)

if TYPE_CHECKING:
    from isoperiod.core.period import Period

logger = logging.getLogger(__name__)

# One "<number><designator>" component
_COMPONENT_RE = re.compile(r"([0-9]+(?:[.,][0-9]+)?)([A-Z])")


def format_period(period: Period) -> str:
    """Format a Period as a canonical ISO 8601 duration string.

    This never fails: every Period has exactly one canonical form.

    Args:
        period: The period to format.

    Returns:
        ISO 8601 duration string.

    Examples:
        >>> from isoperiod import Period
        >>> format_period(Period.zero())
        'P0D'
        >>> format_period(Period(years=-1, months=-2))
        '-P1Y2M'
        >>> format_period(Period(days=25, seconds=7.5))
        'P25DT7.5S'
    """
    from isoperiod.core.period import split_hours_minutes_seconds, split_years_months

    if period.is_zero:
        return "P0D"

    parts = []
    if period.is_negative:
        parts.append("-")
        period = period.negate()

    parts.append("P")

    if period.milli_months:
        years, mmonths = split_years_months(period.milli_months)
        if years:
            parts.append(f"{years}Y")
        if mmonths:
            parts.append(f"{render_thousandths(mmonths)}M")

    if period.milli_days:
        if period.milli_days % MILLI_DAYS_PER_WEEK == 0:
            parts.append(f"{period.milli_days // MILLI_DAYS_PER_WEEK}W")
        else:
            parts.append(f"{render_thousandths(period.milli_days)}D")

    if period.milliseconds:
        hours, minutes, mseconds = split_hours_minutes_seconds(period.milliseconds)
        parts.append("T")
        if hours:
            parts.append(f"{hours}H")
        if minutes:
            parts.append(f"{minutes}M")
        if mseconds:
            parts.append(f"{render_thousandths(mseconds)}S")

    return "".join(parts)


def parse_period(text: str) -> Period:
    """Parse an ISO 8601 duration string into a Period.

    Args:
        text: The string to parse, e.g. "P1Y2M3W4DT5H6M7.5S".

    Returns:
        The Period the string describes.

    Raises:
        ParseError: If the string is not a valid ISO 8601 duration, or a
            value is more precise than a Period can store.

    Examples:
        >>> parse_period("P1Y2M")
        Period.from_fields(14000, 0, 0)

        >>> parse_period("P1W2D")
        Period.from_fields(0, 9000, 0)

        >>> parse_period("PT0,5S")
        Period.from_fields(0, 0, 500)

        >>> parse_period("P1H")
        Traceback (most recent call last):
        ...
        isoperiod.errors.ParseError: unexpected designator 'H' before 'T' in 'P1H'
    """
    from isoperiod.core.period import Period

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    s = text.strip()
    if not s:
        raise _reject(text, "empty string")
    if not s.isascii():
        raise _reject(text, f"ISO 8601 period must be ASCII, got {text!r}")

    negative = s[0] == "-"
    if s[0] in "+-":
        s = s[1:]

    s = s.upper()
    if not s.startswith("P"):
        raise _reject(text, f"ISO 8601 period must start with 'P': {text!r}")

    date_part, separator, time_part = s[1:].partition("T")
    if separator and not time_part:
        raise _reject(text, f"'T' must be followed by a time component in {text!r}")
    if not date_part and not time_part:
        raise _reject(text, f"no period components in {text!r}")

    totals = {MONTHS_FIELD: 0, DAYS_FIELD: 0, TIME_FIELD: 0}
    _parse_section(date_part, DATE_UNITS, "before 'T'", text, totals)
    _parse_section(time_part, TIME_UNITS, "after 'T'", text, totals)

    sign = -1 if negative else 1
    return Period.from_fields(
        sign * totals[MONTHS_FIELD],
        sign * totals[DAYS_FIELD],
        sign * totals[TIME_FIELD],
    )


def _parse_section(
    section: str,
    units: tuple[PeriodUnit, ...],
    where: str,
    text: str,
    totals: dict[str, int],
) -> None:
    """Accumulate the components of one side of the 'T' into totals."""
    by_designator = {unit.designator: unit for unit in units}
    last_index = -1
    pos = 0

    while pos < len(section):
        match = _COMPONENT_RE.match(section, pos)
        if match is None:
            raise _reject(text, f"unexpected {section[pos:]!r} in {text!r}")
        number, designator = match.groups()
        pos = match.end()

        unit = by_designator.get(designator)
        if unit is None:
            raise _reject(text, f"unexpected designator {designator!r} {where} in {text!r}")

        index = units.index(unit)
        if index == last_index:
            raise _reject(text, f"repeated designator {designator!r} in {text!r}")
        if index < last_index:
            raise _reject(text, f"designator {designator!r} out of order in {text!r}")
        last_index = index

        try:
            totals[unit.field] += to_fixed_point(number.replace(",", "."), unit.scale, unit.plural)
        except ValidationError as err:
            raise _reject(text, f"{err} in {text!r}") from err


def _reject(text: str, reason: str) -> ParseError:
    logger.debug("rejected period %r: %s", text, reason)
    return ParseError(reason)


__all__ = ["format_period", "parse_period"]
