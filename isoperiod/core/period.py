"""Period class representing calendar-aware elapsed time.

This module provides the Period class and the integer decomposition
helpers it is printed with. A Period keeps calendar components (months,
days) apart from clock components (hours, minutes, seconds), because a
month has no fixed length and cannot be folded into seconds.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from isoperiod._internal.constants import (
    MILLI_DAYS_PER_DAY,
    MILLI_DAYS_PER_WEEK,
    MILLI_MONTHS_PER_MONTH,
    MILLI_MONTHS_PER_YEAR,
    MILLIS_PER_HOUR,
    MILLIS_PER_MILLI_DAY,
    MILLIS_PER_MILLI_MONTH,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from isoperiod._internal.numeric import from_thousandths, multiply_decimal
from isoperiod._internal.validation import (
    Number,
    to_decimal,
    to_fixed_point,
    validate_field,
    validate_sign_consistency,
)
from isoperiod.units.periodunit import DAYS_FIELD, MONTHS_FIELD, TIME_FIELD, PeriodUnit

if TYPE_CHECKING:
    from isoperiod.format.human import PeriodNames


def split_years_months(milli_months: int) -> tuple[int, int]:
    """Split a non-negative months field into whole years and milli-months.

    Examples:
        >>> split_years_months(14_500)
        (1, 2500)
    """
    assert milli_months >= 0, f"decomposition needs a magnitude, got {milli_months}"
    years = milli_months // MILLI_MONTHS_PER_YEAR
    return years, milli_months - years * MILLI_MONTHS_PER_YEAR


def split_weeks_days(milli_days: int) -> tuple[int, int]:
    """Split a non-negative days field into whole weeks and milli-days.

    Examples:
        >>> split_weeks_days(25_000)
        (3, 4000)
    """
    assert milli_days >= 0, f"decomposition needs a magnitude, got {milli_days}"
    weeks = milli_days // MILLI_DAYS_PER_WEEK
    return weeks, milli_days - weeks * MILLI_DAYS_PER_WEEK


def split_hours_minutes_seconds(milliseconds: int) -> tuple[int, int, int]:
    """Split non-negative milliseconds into hours, minutes and milli-seconds.

    The last item is seconds in thousandths, so it carries the sub-second
    fraction.

    Examples:
        >>> split_hours_minutes_seconds(18_367_500)
        (5, 6, 7500)
    """
    assert milliseconds >= 0, f"decomposition needs a magnitude, got {milliseconds}"
    hours = milliseconds // MILLIS_PER_HOUR
    rest = milliseconds - hours * MILLIS_PER_HOUR
    minutes = rest // MILLIS_PER_MINUTE
    return hours, minutes, rest - minutes * MILLIS_PER_MINUTE


def _trunc_div(value: int, divisor: int) -> int:
    # Integer division truncating toward zero
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _trunc_mod(value: int, divisor: int) -> int:
    return value - _trunc_div(value, divisor) * divisor


class Period:
    """A calendar-aware elapsed time with exact fixed-point storage.

    A Period holds three signed integer fields:

    - ``milli_months``: thousandths of a calendar month (years are folded
      in as 12 000 each)
    - ``milli_days``: thousandths of a day (weeks are folded in as 7 000)
    - ``milliseconds``: hours, minutes and seconds as one millisecond count

    All three share a single sign, so a Period always points in one
    direction. Values are immutable; every operation returns a new Period.

    Because weeks are stored as days and years as months, equality is on
    the stored amounts: ``Period(weeks=1) == Period(days=7)`` and
    ``Period(years=1) == Period(months=12)``.

    Examples:
        >>> p = Period(years=1, months=2, weeks=3, days=4, hours=5, minutes=6, seconds=7.5)
        >>> str(p)
        'P1Y2M25DT5H6M7.5S'
        >>> p.format()
        '1 year, 2 months, 25 days, 5 hours, 6 minutes, 7.5 seconds'

        >>> Period.parse("-P1W").days
        -7
    """

    __slots__ = ("_mmonths", "_mdays", "_mseconds")

    def __init__(
        self,
        years: Number = 0,
        months: Number = 0,
        weeks: Number = 0,
        days: Number = 0,
        hours: Number = 0,
        minutes: Number = 0,
        seconds: Number = 0,
    ) -> None:
        """Create a Period from component parts.

        Components may be int, Decimal, numeric str or float, and may be
        fractional as long as they fit the storage precision: thousandths
        of a month or day, and whole milliseconds.

        Args:
            years: Number of years.
            months: Number of months.
            weeks: Number of weeks.
            days: Number of days.
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.

        Raises:
            ValidationError: If a value is not numeric, is too precise to
                store exactly, or the components mix signs.

        Examples:
            >>> Period(months=1.5)
            Period.from_fields(1500, 0, 0)

            >>> Period(days=-3, hours=-12)
            Period.from_fields(0, -3000, -43200000)
        """
        values = (years, months, weeks, days, hours, minutes, seconds)
        totals = {MONTHS_FIELD: 0, DAYS_FIELD: 0, TIME_FIELD: 0}
        for unit, value in zip(PeriodUnit, values):
            totals[unit.field] += to_fixed_point(value, unit.scale, unit.plural)

        validate_sign_consistency(
            totals[MONTHS_FIELD], totals[DAYS_FIELD], totals[TIME_FIELD]
        )
        self._mmonths = totals[MONTHS_FIELD]
        self._mdays = totals[DAYS_FIELD]
        self._mseconds = totals[TIME_FIELD]

    @classmethod
    def from_fields(cls, milli_months: int, milli_days: int, milliseconds: int) -> Period:
        """Create a Period directly from its three storage fields.

        Args:
            milli_months: Thousandths of a month.
            milli_days: Thousandths of a day.
            milliseconds: Milliseconds.

        Raises:
            ValidationError: If a field is not an int or the fields mix signs.

        Examples:
            >>> str(Period.from_fields(1500, 0, 0))
            'P1.5M'
        """
        validate_field(milli_months, MONTHS_FIELD)
        validate_field(milli_days, DAYS_FIELD)
        validate_field(milliseconds, TIME_FIELD)
        validate_sign_consistency(milli_months, milli_days, milliseconds)

        period = cls.__new__(cls)
        period._mmonths = milli_months
        period._mdays = milli_days
        period._mseconds = milliseconds
        return period

    @classmethod
    def zero(cls) -> Period:
        """Create the zero period (serializes as P0D)."""
        return cls.from_fields(0, 0, 0)

    @classmethod
    def of_years(cls, years: Number) -> Period:
        """Create a Period of a given number of years."""
        return cls(years=years)

    @classmethod
    def of_months(cls, months: Number) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: Number) -> Period:
        """Create a Period of a given number of weeks."""
        return cls(weeks=weeks)

    @classmethod
    def of_days(cls, days: Number) -> Period:
        """Create a Period of a given number of days."""
        return cls(days=days)

    @classmethod
    def of_hours(cls, hours: Number) -> Period:
        """Create a Period of a given number of hours."""
        return cls(hours=hours)

    @classmethod
    def of_minutes(cls, minutes: Number) -> Period:
        """Create a Period of a given number of minutes."""
        return cls(minutes=minutes)

    @classmethod
    def of_seconds(cls, seconds: Number) -> Period:
        """Create a Period of a given number of seconds."""
        return cls(seconds=seconds)

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse an ISO 8601 duration such as 'P1Y2M3DT4H5M6.5S'.

        Raises:
            ParseError: If the text is not a valid ISO 8601 duration.
        """
        from isoperiod.format.iso8601 import parse_period

        return parse_period(text)

    # Storage fields

    @property
    def milli_months(self) -> int:
        """Return the months field in thousandths of a month."""
        return self._mmonths

    @property
    def milli_days(self) -> int:
        """Return the days field in thousandths of a day."""
        return self._mdays

    @property
    def milliseconds(self) -> int:
        """Return the time field in milliseconds."""
        return self._mseconds

    # Components. All truncate toward zero and carry the period's sign.

    @property
    def years(self) -> int:
        """Return the whole years.

        Examples:
            >>> Period(months=-26).years
            -2
        """
        return _trunc_div(self._mmonths, MILLI_MONTHS_PER_YEAR)

    @property
    def months(self) -> int:
        """Return the whole months left after taking out years.

        Examples:
            >>> Period(months=14.5).months
            2
        """
        return _trunc_div(_trunc_mod(self._mmonths, MILLI_MONTHS_PER_YEAR), MILLI_MONTHS_PER_MONTH)

    @property
    def months_decimal(self) -> Decimal:
        """Return the months left after taking out years, with fraction."""
        return from_thousandths(_trunc_mod(self._mmonths, MILLI_MONTHS_PER_YEAR))

    @property
    def weeks(self) -> int:
        """Return the whole weeks in the days field."""
        return _trunc_div(self._mdays, MILLI_DAYS_PER_WEEK)

    @property
    def days(self) -> int:
        """Return the total whole days, weeks included.

        Examples:
            >>> Period(weeks=2, days=3).days
            17
        """
        return _trunc_div(self._mdays, MILLI_DAYS_PER_DAY)

    @property
    def modulo_days(self) -> int:
        """Return the whole days left after taking out weeks.

        Examples:
            >>> Period(weeks=2, days=3).modulo_days
            3
        """
        return _trunc_div(_trunc_mod(self._mdays, MILLI_DAYS_PER_WEEK), MILLI_DAYS_PER_DAY)

    @property
    def days_decimal(self) -> Decimal:
        """Return the total days, weeks included, with fraction."""
        return from_thousandths(self._mdays)

    @property
    def hours(self) -> int:
        """Return the whole hours."""
        return _trunc_div(self._mseconds, MILLIS_PER_HOUR)

    @property
    def minutes(self) -> int:
        """Return the whole minutes left after taking out hours."""
        return _trunc_div(_trunc_mod(self._mseconds, MILLIS_PER_HOUR), MILLIS_PER_MINUTE)

    @property
    def seconds(self) -> int:
        """Return the whole seconds left after taking out minutes."""
        return _trunc_div(_trunc_mod(self._mseconds, MILLIS_PER_MINUTE), MILLIS_PER_SECOND)

    @property
    def seconds_decimal(self) -> Decimal:
        """Return the seconds left after taking out minutes, with fraction.

        Examples:
            >>> Period(minutes=1, seconds=7.5).seconds_decimal
            Decimal('7.500')
        """
        return from_thousandths(_trunc_mod(self._mseconds, MILLIS_PER_MINUTE))

    # Sign

    @property
    def is_zero(self) -> bool:
        """Return True if all three fields are zero."""
        return self._mmonths == 0 and self._mdays == 0 and self._mseconds == 0

    @property
    def is_positive(self) -> bool:
        """Return True if the period points forward."""
        return self.sign > 0

    @property
    def is_negative(self) -> bool:
        """Return True if the period points backward."""
        return self.sign < 0

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1 according to the period's direction."""
        for field in (self._mmonths, self._mdays, self._mseconds):
            if field:
                return 1 if field > 0 else -1
        return 0

    def negate(self) -> Period:
        """Return a period of the same size pointing the other way."""
        return Period.from_fields(-self._mmonths, -self._mdays, -self._mseconds)

    def abs(self) -> Period:
        """Return the non-negative period of the same size."""
        if self.is_negative:
            return self.negate()
        return self

    def scale(self, factor: Number) -> Period:
        """Multiply every field by a factor.

        Integer factors are exact. Other factors are applied in exact
        integer arithmetic and each field is truncated toward zero to its
        storage precision.

        Args:
            factor: The multiplier (int, Decimal, numeric str or float).

        Raises:
            ValidationError: If factor is not numeric.

        Examples:
            >>> str(Period(days=3).scale(Decimal("0.5")))
            'P1.5D'
            >>> str(Period(months=1).scale(-2))
            '-P2M'
        """
        if isinstance(factor, int) and not isinstance(factor, bool):
            return Period.from_fields(
                self._mmonths * factor,
                self._mdays * factor,
                self._mseconds * factor,
            )

        exact = to_decimal(factor, "factor")

        def scaled(field: int) -> int:
            return multiply_decimal(field, exact)[0]

        return Period.from_fields(
            scaled(self._mmonths), scaled(self._mdays), scaled(self._mseconds)
        )

    # Conversions

    def to_timedelta(self) -> tuple[timedelta, bool]:
        """Convert to an approximate timedelta.

        Months are taken as 30.436875 days (a 365.2425-day year divided by
        twelve) and days as 24 hours.

        Returns:
            A (timedelta, precise) tuple. precise is True only when the
            period has no month or day components.

        Examples:
            >>> Period(hours=1, minutes=30).to_timedelta()
            (datetime.timedelta(seconds=5400), True)
            >>> Period(days=1).to_timedelta()
            (datetime.timedelta(days=1), False)
        """
        total = (
            self._mmonths * MILLIS_PER_MILLI_MONTH
            + self._mdays * MILLIS_PER_MILLI_DAY
            + self._mseconds
        )
        precise = self._mmonths == 0 and self._mdays == 0
        return timedelta(milliseconds=total), precise

    def format(self, names: PeriodNames | None = None) -> str:
        """Return a human-readable form such as '2 months, 3 days'.

        Args:
            names: Plural names for each unit. Defaults to English.

        Examples:
            >>> Period(days=1, hours=2).format()
            '1 day, 2 hours'
        """
        from isoperiod.format.human import format_human

        return format_human(self, names)

    def to_json(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        from isoperiod.convert.json import to_json

        return to_json(self)

    # Operators

    def __add__(self, other: object) -> Period:
        """Add two periods field by field.

        Raises:
            ValidationError: If the result would mix signs.

        Examples:
            >>> str(Period(years=1) + Period(weeks=2))
            'P1Y2W'
        """
        if not isinstance(other, Period):
            return NotImplemented
        return Period.from_fields(
            self._mmonths + other._mmonths,
            self._mdays + other._mdays,
            self._mseconds + other._mseconds,
        )

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        """Subtract one period from another.

        Raises:
            ValidationError: If the result would mix signs.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return Period.from_fields(
            self._mmonths - other._mmonths,
            self._mdays - other._mdays,
            self._mseconds - other._mseconds,
        )

    def __neg__(self) -> Period:
        return self.negate()

    def __pos__(self) -> Period:
        return self

    def __abs__(self) -> Period:
        return self.abs()

    def __mul__(self, other: object) -> Period:
        """Multiply by an int or Decimal factor (see scale())."""
        if isinstance(other, bool) or not isinstance(other, (int, Decimal)):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other: object) -> Period:
        """Support factor * Period."""
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check equality of the stored amounts."""
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._mmonths == other._mmonths
            and self._mdays == other._mdays
            and self._mseconds == other._mseconds
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._mmonths, self._mdays, self._mseconds))

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero

    def __repr__(self) -> str:
        return f"Period.from_fields({self._mmonths}, {self._mdays}, {self._mseconds})"

    def __str__(self) -> str:
        """Return the canonical ISO 8601 form, e.g. 'P1Y2M3DT4H'."""
        from isoperiod.format.iso8601 import format_period

        return format_period(self)



__all__ = [
    "Period",
    "split_years_months",
    "split_weeks_days",
    "split_hours_minutes_seconds",
]
