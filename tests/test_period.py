"""Tests for the Period class.

This module tests construction, storage, component accessors, sign
handling and arithmetic of Period values.
"""

from datetime import timedelta
from decimal import Decimal, localcontext

import pytest

from isoperiod import Period, ValidationError
from isoperiod.core.period import (
    Period as PeriodDirect,
    split_hours_minutes_seconds,
    split_weeks_days,
    split_years_months,
)


# =============================================================================
# Construction Tests
# =============================================================================


class TestPeriodConstruction:
    """Tests for Period construction."""

    def test_default_construction(self):
        """Test default construction creates zero period."""
        p = Period()
        assert p.milli_months == 0
        assert p.milli_days == 0
        assert p.milliseconds == 0
        assert p.is_zero

    def test_construction_with_all_components(self, full_period):
        """Test every component lands in its storage field."""
        assert full_period.milli_months == 14_000
        assert full_period.milli_days == 25_000
        assert full_period.milliseconds == 5 * 3_600_000 + 6 * 60_000 + 7_500

    def test_years_fold_into_months(self):
        """Years are stored as 12 000 milli-months each."""
        assert Period(years=2).milli_months == 24_000

    def test_weeks_fold_into_days(self):
        """Weeks are stored as 7 000 milli-days each."""
        assert Period(weeks=2, days=1).milli_days == 15_000

    def test_fractional_components(self):
        """Fractions down to storage precision are exact."""
        p = Period(months="1.5", days=Decimal("0.25"), seconds=0.1)
        assert p.milli_months == 1_500
        assert p.milli_days == 250
        assert p.milliseconds == 100

    def test_fractional_hours(self):
        """Fractional hours are converted to whole milliseconds."""
        assert Period(hours=1.5).milliseconds == 5_400_000

    def test_construction_with_negative_values(self):
        """Negative components give a negative period."""
        p = Period(years=-1, months=-2)
        assert p.milli_months == -14_000
        assert p.is_negative

    def test_too_precise_value_raises(self):
        """Values finer than storage precision are rejected."""
        with pytest.raises(ValidationError, match="too precise"):
            Period(months="0.0001")
        with pytest.raises(ValidationError, match="too precise"):
            Period(seconds="1.0005")

    def test_too_precise_beyond_context_precision(self):
        """Digits past the decimal context's precision are still checked."""
        with pytest.raises(ValidationError, match="too precise"):
            Period(seconds="1.0000000000000000000000000001")
        with pytest.raises(ValidationError, match="too precise"):
            Period(days=Decimal("12345678901234567890123456789.0001"))

    def test_many_digits_stored_exactly(self):
        """Long exact values are not rounded to the context precision."""
        p = Period(seconds="12345678901234567890123456789.123")
        assert p.milliseconds == 12345678901234567890123456789123

    def test_mixed_signs_raise(self):
        """Components pointing in opposite directions are rejected."""
        with pytest.raises(ValidationError, match="mix signs"):
            Period(days=1, hours=-1)

    def test_mixed_signs_within_field_are_summed(self):
        """Opposite signs inside one field cancel rather than conflict."""
        p = Period(years=1, months=-2)
        assert p.milli_months == 10_000

    def test_non_numeric_raises(self):
        """Non-numeric component values are rejected."""
        with pytest.raises(ValidationError):
            Period(days="three")
        with pytest.raises(ValidationError):
            Period(days=True)
        with pytest.raises(ValidationError):
            Period(days=[1])

    def test_non_finite_raises(self):
        """Infinite and NaN values are rejected."""
        with pytest.raises(ValidationError, match="finite"):
            Period(days=float("inf"))
        with pytest.raises(ValidationError, match="finite"):
            Period(days=Decimal("NaN"))

    def test_direct_import(self):
        """Period from the core module is the same class."""
        assert Period is PeriodDirect


class TestPeriodFromFields:
    """Tests for Period.from_fields."""

    def test_from_fields(self):
        """Raw fields are stored unchanged."""
        p = Period.from_fields(1_500, 250, 100)
        assert (p.milli_months, p.milli_days, p.milliseconds) == (1_500, 250, 100)

    def test_from_fields_mixed_signs(self):
        """Mixed signs are rejected."""
        with pytest.raises(ValidationError):
            Period.from_fields(1, -1, 0)

    def test_from_fields_rejects_non_int(self):
        """Fields must be plain ints."""
        with pytest.raises(ValidationError, match="must be an int"):
            Period.from_fields(1.5, 0, 0)
        with pytest.raises(ValidationError, match="must be an int"):
            Period.from_fields(0, True, 0)


# =============================================================================
# Factory Method Tests
# =============================================================================


class TestPeriodFactoryMethods:
    """Tests for Period factory methods."""

    def test_of_years(self):
        assert Period.of_years(5) == Period(years=5)

    def test_of_months(self):
        assert Period.of_months(6) == Period(months=6)

    def test_of_weeks(self):
        assert Period.of_weeks(2) == Period(days=14)

    def test_of_days(self):
        assert Period.of_days(10) == Period(days=10)

    def test_of_hours(self):
        assert Period.of_hours(3) == Period(minutes=180)

    def test_of_minutes(self):
        assert Period.of_minutes(90) == Period(hours=1, minutes=30)

    def test_of_seconds(self):
        assert Period.of_seconds("1.25").milliseconds == 1_250

    def test_zero(self):
        """Test Period.zero factory method."""
        assert Period.zero().is_zero
        assert Period.zero() == Period()

    def test_parse(self):
        """Period.parse reads ISO 8601 text."""
        assert Period.parse("P1Y2M") == Period(years=1, months=2)


# =============================================================================
# Decomposition Tests
# =============================================================================


class TestDecomposition:
    """Tests for the integer split helpers."""

    def test_split_years_months(self):
        assert split_years_months(14_500) == (1, 2_500)
        assert split_years_months(11_999) == (0, 11_999)
        assert split_years_months(24_000) == (2, 0)

    def test_split_weeks_days(self):
        assert split_weeks_days(25_000) == (3, 4_000)
        assert split_weeks_days(7_500) == (1, 500)

    def test_split_hours_minutes_seconds(self):
        assert split_hours_minutes_seconds(18_367_500) == (5, 6, 7_500)
        assert split_hours_minutes_seconds(59_999) == (0, 0, 59_999)

    def test_split_rejects_negative(self):
        """Decomposition only runs on magnitudes."""
        with pytest.raises(AssertionError):
            split_years_months(-1)
        with pytest.raises(AssertionError):
            split_hours_minutes_seconds(-1)


# =============================================================================
# Accessor Tests
# =============================================================================


class TestPeriodAccessors:
    """Tests for component accessors."""

    def test_components(self, full_period):
        """Whole components of a positive period."""
        assert full_period.years == 1
        assert full_period.months == 2
        assert full_period.weeks == 3
        assert full_period.days == 25
        assert full_period.modulo_days == 4
        assert full_period.hours == 5
        assert full_period.minutes == 6
        assert full_period.seconds == 7

    def test_components_negative(self, full_period):
        """Components carry the sign and truncate toward zero."""
        p = -full_period
        assert p.years == -1
        assert p.months == -2
        assert p.weeks == -3
        assert p.days == -25
        assert p.modulo_days == -4
        assert p.hours == -5
        assert p.minutes == -6
        assert p.seconds == -7

    def test_decimal_components(self, full_period):
        """Decimal accessors keep the fraction."""
        assert full_period.months_decimal == Decimal("2")
        assert full_period.days_decimal == Decimal("25")
        assert full_period.seconds_decimal == Decimal("7.5")
        assert Period(months=-1.5).months_decimal == Decimal("-1.5")

    def test_months_truncate(self):
        """Fractional months truncate in the integer accessor."""
        assert Period(months=14.5).months == 2
        assert Period(months=-14.5).months == -2


# =============================================================================
# Sign Tests
# =============================================================================


class TestPeriodSign:
    """Tests for sign, negate and abs."""

    def test_sign(self):
        assert Period(days=1).sign == 1
        assert Period(seconds=-1).sign == -1
        assert Period.zero().sign == 0

    def test_is_positive_negative(self):
        assert Period(hours=1).is_positive
        assert not Period(hours=1).is_negative
        assert Period(hours=-1).is_negative
        assert not Period.zero().is_positive
        assert not Period.zero().is_negative

    def test_negate(self, full_period):
        n = full_period.negate()
        assert n.milli_months == -full_period.milli_months
        assert n.milli_days == -full_period.milli_days
        assert n.milliseconds == -full_period.milliseconds
        assert n.negate() == full_period

    def test_negate_does_not_mutate(self, full_period):
        before = (full_period.milli_months, full_period.milli_days, full_period.milliseconds)
        full_period.negate()
        after = (full_period.milli_months, full_period.milli_days, full_period.milliseconds)
        assert before == after

    def test_abs(self, full_period):
        assert abs(-full_period) == full_period
        assert full_period.abs() is full_period
        assert Period.zero().abs() == Period.zero()

    def test_pos(self, full_period):
        assert +full_period == full_period


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestPeriodArithmetic:
    """Tests for Period arithmetic."""

    def test_add(self):
        assert Period(years=1) + Period(months=6, days=2) == Period(years=1, months=6, days=2)

    def test_add_mixed_signs_raises(self):
        """A sum whose fields point both ways is rejected."""
        with pytest.raises(ValidationError):
            Period(days=1) + Period(hours=-1)

    def test_add_cancelling(self):
        """A sum that cancels one field is fine."""
        assert Period(days=2, hours=1) + Period(days=-2) == Period(hours=1)

    def test_sum(self):
        """sum() works thanks to __radd__."""
        total = sum([Period(days=1), Period(days=2), Period(hours=3)])
        assert total == Period(days=3, hours=3)

    def test_radd_only_accepts_int_zero(self):
        """Only the int 0 that sum() starts from is absorbed."""
        assert 0 + Period(days=1) == Period(days=1)
        with pytest.raises(TypeError):
            False + Period(days=1)
        with pytest.raises(TypeError):
            0.0 + Period(days=1)
        with pytest.raises(TypeError):
            Decimal(0) + Period(days=1)

    def test_sub(self):
        assert Period(months=3) - Period(months=1) == Period(months=2)

    def test_add_non_period(self):
        with pytest.raises(TypeError):
            Period(days=1) + 1

    def test_scale_int(self):
        assert Period(months=3, seconds=1.5) * 2 == Period(months=6, seconds=3)
        assert 2 * Period(days=1) == Period(days=2)

    def test_scale_negative(self):
        assert Period(days=1).scale(-3) == Period(days=-3)

    def test_scale_decimal(self):
        """Decimal factors are exact down to storage precision."""
        assert Period(days=3) * Decimal("0.5") == Period(days="1.5")

    def test_scale_truncates(self):
        """Results finer than storage precision truncate toward zero."""
        assert Period.from_fields(1, 0, 0).scale("0.5") == Period.zero()
        assert Period.from_fields(-3, 0, 0).scale("0.5") == Period.from_fields(-1, 0, 0)

    def test_scale_float(self):
        """Floats go through their shortest repr."""
        assert Period(seconds=10).scale(0.1) == Period(seconds=1)

    def test_mul_unsupported(self):
        with pytest.raises(TypeError):
            Period(days=1) * 1.5
        with pytest.raises(TypeError):
            Period(days=1) * "2"


class TestDecimalContext:
    """Results do not depend on the caller's decimal context."""

    def test_construction_low_precision(self):
        with localcontext() as ctx:
            ctx.prec = 3
            p = Period(days="12.345", seconds=Decimal("98765.432"))
        assert p.milli_days == 12_345
        assert p.milliseconds == 98_765_432

    def test_accessors_low_precision(self):
        p = Period(months="3.456", days="12.345", seconds="7.891")
        with localcontext() as ctx:
            ctx.prec = 2
            assert p.months_decimal == Decimal("3.456")
            assert p.days_decimal == Decimal("12.345")
            assert p.seconds_decimal == Decimal("7.891")

    def test_format_low_precision(self):
        p = Period(days="12.345")
        with localcontext() as ctx:
            ctx.prec = 3
            assert p.format() == "12.345 days"
            assert str(p) == "P12.345D"

    def test_scale_low_precision(self):
        p = Period.from_fields(0, 0, 12_345)
        with localcontext() as ctx:
            ctx.prec = 3
            assert p.scale(Decimal("1.5")) == Period.from_fields(0, 0, 18_517)
            assert p.scale("-0.001") == Period.from_fields(0, 0, -12)


# =============================================================================
# Comparison Tests
# =============================================================================


class TestPeriodComparison:
    """Tests for equality and hashing."""

    def test_equality_of_stored_amounts(self):
        """Folded units compare equal."""
        assert Period(weeks=1) == Period(days=7)
        assert Period(years=1) == Period(months=12)
        assert Period(hours=1) == Period(minutes=60)

    def test_inequality(self):
        assert Period(days=1) != Period(days=2)
        assert Period(days=1) != Period(hours=24)

    def test_equality_with_other_types(self):
        assert Period(days=1) != "P1D"
        assert (Period(days=1) == 1) is False

    def test_hash(self):
        assert hash(Period(weeks=1)) == hash(Period(days=7))
        assert len({Period(weeks=1), Period(days=7), Period(days=8)}) == 2

    def test_bool(self):
        assert not Period.zero()
        assert Period(seconds=0.001)

    def test_repr(self):
        assert repr(Period(months=1.5)) == "Period.from_fields(1500, 0, 0)"


# =============================================================================
# Conversion Tests
# =============================================================================


class TestPeriodToTimedelta:
    """Tests for Period.to_timedelta."""

    def test_time_only_is_precise(self):
        td, precise = Period(hours=1, minutes=30).to_timedelta()
        assert td == timedelta(hours=1, minutes=30)
        assert precise

    def test_days_are_imprecise(self):
        td, precise = Period(days=1.5).to_timedelta()
        assert td == timedelta(days=1, hours=12)
        assert not precise

    def test_months_use_average_length(self):
        td, precise = Period(months=1).to_timedelta()
        assert td == timedelta(seconds=2_629_746)
        assert not precise

    def test_year_is_365_2425_days(self):
        td, _ = Period(years=1).to_timedelta()
        assert td == timedelta(days=365, seconds=20_952)

    def test_negative(self):
        td, _ = Period(hours=-2).to_timedelta()
        assert td == timedelta(hours=-2)

    def test_zero(self):
        assert Period.zero().to_timedelta() == (timedelta(0), True)
