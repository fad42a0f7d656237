"""Validation utilities for isoperiod.

This module converts user-supplied component values to the fixed-point
integers stored by Period, and checks that a set of stored fields
describes a single direction of elapsed time.

This module is not part of the public API.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from isoperiod._internal.numeric import multiply_decimal
from isoperiod.errors import ValidationError

# Values accepted wherever a period component is given
Number = Union[int, float, Decimal, str]


def to_decimal(value: Number, name: str) -> Decimal:
    """Convert a numeric value to an exact, finite Decimal.

    Floats are read through their shortest repr.

    Raises:
        ValidationError: If the value is not numeric or not finite.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        text = repr(value)
    elif isinstance(value, (str, Decimal)):
        text = value
    else:
        raise ValidationError(
            f"{name} must be a number, got {type(value).__name__}"
        )

    try:
        number = Decimal(text)
    except InvalidOperation as err:
        raise ValidationError(f"{name} must be a number, got {value!r}") from err

    if not number.is_finite():
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return number


def to_fixed_point(value: Number, scale: int, name: str) -> int:
    """Convert a component value to an integer count of 1/scale units.

    Integers are multiplied directly. Decimals and numeric strings are
    scaled in exact integer arithmetic, whatever the current decimal
    context. Floats are read through their shortest repr, so 0.1 means
    one tenth rather than its binary approximation.

    Args:
        value: The component value.
        scale: Number of storage units per whole component unit.
        name: Component name used in error messages.

    Returns:
        The value expressed in storage units.

    Raises:
        ValidationError: If the value is not numeric, not finite, or
            cannot be held exactly at this scale.

    Examples:
        >>> to_fixed_point(2, 12_000, "years")
        24000
        >>> to_fixed_point("1.5", 1_000, "months")
        1500
        >>> to_fixed_point(0.1, 1_000, "seconds")
        100
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value * scale

    scaled, exact = multiply_decimal(scale, to_decimal(value, name))
    if not exact:
        raise ValidationError(
            f"{name} is too precise to store exactly (1/{scale} units), got {value!r}"
        )
    return scaled


def validate_sign_consistency(milli_months: int, milli_days: int, milliseconds: int) -> None:
    """Validate that the three storage fields share one sign.

    Zero fields are compatible with either sign.

    Raises:
        ValidationError: If one field is positive and another negative.
    """
    fields = (milli_months, milli_days, milliseconds)
    if any(f > 0 for f in fields) and any(f < 0 for f in fields):
        raise ValidationError(
            "period components must not mix signs, got "
            f"milli_months={milli_months}, milli_days={milli_days}, "
            f"milliseconds={milliseconds}"
        )


def validate_field(value: object, name: str) -> int:
    """Validate that a raw storage field is a plain integer.

    Raises:
        ValidationError: If value is not an int (bool is rejected).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an int, got {value!r}")
    return value


__all__ = [
    "Number",
    "to_decimal",
    "to_fixed_point",
    "validate_sign_consistency",
    "validate_field",
]
