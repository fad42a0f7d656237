"""Exact rendering of fixed-point numbers.

All text output goes through these helpers so that stored thousandths
print as the shortest decimal that reproduces them, with no binary
floating-point step in between.

Decimal values are taken apart with as_tuple() and handled as integers.
Decimal arithmetic rounds to the current context's precision, so none of
these helpers multiply, scale or normalize a Decimal.

This module is not part of the public API.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Union

from isoperiod._internal.constants import THOUSANDTHS


def decimal_parts(value: Decimal) -> tuple[int, int]:
    """Split a finite Decimal into a signed integer coefficient and exponent.

    The value equals ``coefficient * 10 ** exponent`` exactly.

    Examples:
        >>> decimal_parts(Decimal("-12.50"))
        (-1250, -2)
        >>> decimal_parts(Decimal("3E+2"))
        (3, 2)
    """
    sign, digits, exponent = value.as_tuple()
    assert isinstance(exponent, int), f"expected a finite Decimal, got {value!r}"
    coefficient = int("".join(map(str, digits)))
    return (-coefficient if sign else coefficient), exponent


def multiply_decimal(value: int, factor: Decimal) -> tuple[int, bool]:
    """Multiply an int by a finite Decimal, truncating toward zero.

    Returns:
        The truncated product and whether it is exact.

    Examples:
        >>> multiply_decimal(1000, Decimal("1.5"))
        (1500, True)
        >>> multiply_decimal(-7, Decimal("0.5"))
        (-3, False)
    """
    coefficient, exponent = decimal_parts(factor)
    product = value * coefficient
    if exponent >= 0:
        return product * 10**exponent, True
    if not product:
        return 0, True
    if -exponent > len(str(abs(product))):
        # |product| < 10 ** -exponent
        return 0, False
    whole, rest = divmod(abs(product), 10**-exponent)
    return (-whole if product < 0 else whole), not rest


def render_thousandths(value: int) -> str:
    """Render a non-negative thousandths count as a minimal decimal.

    Examples:
        >>> render_thousandths(1500)
        '1.5'
        >>> render_thousandths(2000)
        '2'
        >>> render_thousandths(7)
        '0.007'
    """
    assert value >= 0, f"expected a non-negative magnitude, got {value}"
    whole, frac = divmod(value, THOUSANDTHS)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:03d}".rstrip("0")


def from_thousandths(value: int) -> Decimal:
    """Return the exact Decimal value of a thousandths count."""
    digits = tuple(int(c) for c in str(abs(value)))
    return Decimal((1 if value < 0 else 0, digits, -3))


def render_number(value: Union[int, Decimal]) -> str:
    """Render an int or Decimal with no exponent and no trailing zeros.

    Examples:
        >>> render_number(3)
        '3'
        >>> render_number(Decimal("7.500"))
        '7.5'
        >>> render_number(Decimal("1E+2"))
        '100'
    """
    if isinstance(value, int):
        return str(value)

    coefficient, exponent = decimal_parts(value)
    if exponent >= 0:
        return str(coefficient * 10**exponent)

    sign = "-" if coefficient < 0 else ""
    digits = str(abs(coefficient)).rjust(1 - exponent, "0")
    whole, frac = digits[:exponent], digits[exponent:].rstrip("0")
    if not frac:
        return sign + whole if int(whole) else whole
    return f"{sign}{whole}.{frac}"


__all__ = [
    "decimal_parts",
    "multiply_decimal",
    "render_thousandths",
    "from_thousandths",
    "render_number",
]
