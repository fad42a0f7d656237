"""Period conversion utilities.

This module provides functions for converting periods to and from
other representations:
    - JSON serialization and deserialization

Examples:
    >>> from isoperiod import Period
    >>> from isoperiod.convert import to_json, from_json

    >>> p = Period(months=3, hours=12)
    >>> data = to_json(p)
    >>> restored = from_json(data)
    >>> restored == p
    True
"""

from __future__ import annotations

from isoperiod.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
