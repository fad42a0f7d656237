"""Human-readable period formatting.

This module renders a Period as text such as "1 year, 2 months, 3 days".
Each unit's wording is supplied as a Plurals value, so any language whose
plural rules fit "exact number, else last form" can be configured without
code changes.

Names:
    PeriodNames: The seven per-unit Plurals used by format_human.
    DEFAULT_PERIOD_NAMES: English names; weeks are off, so days are not
        folded into weeks.
    ENGLISH_WEEK_NAMES: English week names, for PeriodNames.with_weeks().

Examples:
    >>> from isoperiod import Period
    >>> format_human(Period(days=10, hours=1))
    '10 days, 1 hour'

    >>> format_human(Period(days=10, hours=1), DEFAULT_PERIOD_NAMES.with_weeks())
    '1 week, 3 days, 1 hour'
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from isoperiod._internal.numeric import from_thousandths
from isoperiod.format.plural import Plurals

if TYPE_CHECKING:
    from isoperiod.core.period import Period

SEPARATOR = ", "

ENGLISH_YEAR_NAMES = Plurals.from_zero("", "%v year", "%v years")
ENGLISH_MONTH_NAMES = Plurals.from_zero("", "%v month", "%v months")
ENGLISH_WEEK_NAMES = Plurals.from_zero("", "%v week", "%v weeks")
ENGLISH_DAY_NAMES = Plurals.from_zero("%v days", "%v day", "%v days")
ENGLISH_HOUR_NAMES = Plurals.from_zero("", "%v hour", "%v hours")
ENGLISH_MINUTE_NAMES = Plurals.from_zero("", "%v minute", "%v minutes")
ENGLISH_SECOND_NAMES = Plurals.from_zero("", "%v second", "%v seconds")


@dataclass(frozen=True)
class PeriodNames:
    """Plural names for each unit of a period.

    An empty Plurals for a unit hides that unit. For weeks, an empty
    Plurals also means days are written out in full instead of being
    split into weeks and days.
    """

    years: Plurals = ENGLISH_YEAR_NAMES
    months: Plurals = ENGLISH_MONTH_NAMES
    weeks: Plurals = Plurals()
    days: Plurals = ENGLISH_DAY_NAMES
    hours: Plurals = ENGLISH_HOUR_NAMES
    minutes: Plurals = ENGLISH_MINUTE_NAMES
    seconds: Plurals = ENGLISH_SECOND_NAMES

    def with_weeks(self, weeks: Plurals = ENGLISH_WEEK_NAMES) -> PeriodNames:
        """Return a copy that splits days into weeks and days."""
        return replace(self, weeks=weeks)


DEFAULT_PERIOD_NAMES = PeriodNames()


def format_human(period: Period, names: Optional[PeriodNames] = None) -> str:
    """Format a period as human-readable text.

    The sign is dropped: "-P1D" and "P1D" both read "1 day". Fragments are
    written in the order years, months, weeks, days, hours, minutes,
    seconds and joined with ", ". A fragment is left out only when its
    Plurals returns the empty string.

    Days are considered only when the period has a positive days field,
    or is zero (so the zero period reads "0 days" with English names).

    Args:
        period: The period to format.
        names: Plural names for each unit. Defaults to DEFAULT_PERIOD_NAMES.

    Returns:
        The joined fragments; may be empty if every fragment is hidden.

    Examples:
        >>> from isoperiod import Period
        >>> format_human(Period.zero())
        '0 days'
        >>> format_human(Period(months=-1.5))
        '1.5 months'
    """
    from isoperiod.core.period import (
        split_hours_minutes_seconds,
        split_weeks_days,
        split_years_months,
    )

    if names is None:
        names = DEFAULT_PERIOD_NAMES

    period = period.abs()
    parts: list[str] = []

    years, mmonths = split_years_months(period.milli_months)
    _append_non_blank(parts, names.years.format(years))
    _append_non_blank(parts, names.months.format(from_thousandths(mmonths)))

    mdays = period.milli_days
    if mdays > 0 or period.is_zero:
        if names.weeks:
            weeks, rest = split_weeks_days(mdays)
            if weeks > 0:
                _append_non_blank(parts, names.weeks.format(weeks))
            if rest > 0 or weeks == 0:
                _append_non_blank(parts, names.days.format(from_thousandths(rest)))
        else:
            _append_non_blank(parts, names.days.format(from_thousandths(mdays)))

    hours, minutes, mseconds = split_hours_minutes_seconds(period.milliseconds)
    _append_non_blank(parts, names.hours.format(hours))
    _append_non_blank(parts, names.minutes.format(minutes))
    _append_non_blank(parts, names.seconds.format(from_thousandths(mseconds)))

    return SEPARATOR.join(parts)


def _append_non_blank(parts: list[str], fragment: str) -> None:
    if fragment:
        parts.append(fragment)


__all__ = [
    "PeriodNames",
    "DEFAULT_PERIOD_NAMES",
    "ENGLISH_YEAR_NAMES",
    "ENGLISH_MONTH_NAMES",
    "ENGLISH_WEEK_NAMES",
    "ENGLISH_DAY_NAMES",
    "ENGLISH_HOUR_NAMES",
    "ENGLISH_MINUTE_NAMES",
    "ENGLISH_SECOND_NAMES",
    "SEPARATOR",
    "format_human",
]
