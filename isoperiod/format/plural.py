"""Plural-form selection for unit names.

A Plurals value is an ordered list of cases. Each case pairs an exact
number with a template such as "%v days". Formatting a value picks the
first case whose number equals the value, falling back to the last case,
and substitutes the value for every "%v".

A template without "%v" is returned as-is, so an empty template hides
the unit for that value:

    >>> years = Plurals.from_zero("", "%v year", "%v years")
    >>> years.format(0)
    ''
    >>> years.format(1)
    '1 year'
    >>> years.format(Decimal("2.5"))
    '2.5 years'
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, Union

from isoperiod._internal.numeric import render_number

PLACEHOLDER = "%v"


@dataclass(frozen=True)
class Case:
    """A template used when the formatted value equals ``number``."""

    number: int
    template: str

    def format(self, value: Union[int, Decimal]) -> str:
        if PLACEHOLDER not in self.template:
            return self.template
        return self.template.replace(PLACEHOLDER, render_number(value))


class Plurals:
    """An ordered, immutable sequence of plural cases.

    An empty Plurals formats every value as the empty string.
    """

    __slots__ = ("_cases",)

    def __init__(self, *cases: Case) -> None:
        self._cases: tuple[Case, ...] = tuple(cases)

    @classmethod
    def from_zero(cls, *templates: str) -> Plurals:
        """Build cases numbered 0, 1, 2, ... from the templates."""
        return cls(*(Case(i, t) for i, t in enumerate(templates)))

    @classmethod
    def from_one(cls, *templates: str) -> Plurals:
        """Build cases numbered 1, 2, 3, ... from the templates."""
        return cls(*(Case(i, t) for i, t in enumerate(templates, start=1)))

    @property
    def cases(self) -> tuple[Case, ...]:
        return self._cases

    def format(self, value: Union[int, Decimal]) -> str:
        """Format a value with the matching case.

        Args:
            value: A non-negative int or exact Decimal.

        Returns:
            The rendered fragment, or "" if there are no cases or the
            chosen template hides the value.
        """
        if not self._cases:
            return ""
        for case in self._cases:
            if value == case.number:
                return case.format(value)
        return self._cases[-1].format(value)

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[Case]:
        return iter(self._cases)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plurals):
            return NotImplemented
        return self._cases == other._cases

    def __hash__(self) -> int:
        return hash(self._cases)

    def __repr__(self) -> str:
        return f"Plurals{self._cases!r}"


__all__ = ["Case", "Plurals", "PLACEHOLDER"]
