"""JSON serialization and deserialization for periods.

This module provides functions for converting periods to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a Period to a JSON-serializable dict.
    from_json: Create a Period from a JSON dict.

The JSON format carries the ISO 8601 string for readability and the three
storage fields for an exact round trip:

    {"_type": "Period", "value": "P1Y2M", "fields": [14000, 0, 0]}

Examples:
    >>> from isoperiod import Period
    >>> from isoperiod.convert import to_json, from_json

    >>> data = to_json(Period(years=1, months=2))
    >>> data["value"]
    'P1Y2M'

    >>> from_json(data) == Period(years=1, months=2)
    True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from isoperiod.errors import ParseError, ValidationError

if TYPE_CHECKING:
    from isoperiod.core.period import Period

logger = logging.getLogger(__name__)

TYPE_TAG = "Period"


def to_json(value: Period) -> dict[str, Any]:
    """Convert a Period to a JSON-serializable dictionary.

    Args:
        value: The Period to convert.

    Returns:
        A dictionary with `_type`, `value` and `fields` keys.

    Raises:
        TypeError: If value is not a Period.

    Examples:
        >>> from isoperiod import Period
        >>> to_json(Period(days=1.5))
        {'_type': 'Period', 'value': 'P1.5D', 'fields': [0, 1500, 0]}
    """
    from isoperiod.core.period import Period

    if not isinstance(value, Period):
        raise TypeError(f"expected Period, got {type(value).__name__}")

    return {
        "_type": TYPE_TAG,
        "value": str(value),
        "fields": [value.milli_months, value.milli_days, value.milliseconds],
    }


def from_json(data: dict[str, Any]) -> Period:
    """Create a Period from a JSON dictionary.

    The exact `fields` triple is used when present; otherwise the ISO 8601
    `value` is parsed.

    Args:
        data: A dictionary as produced by to_json().

    Returns:
        The Period described by the data.

    Raises:
        ParseError: If the data is not a dict, lacks required fields, or
            holds invalid values.
        TypeError: If `_type` names something other than a Period.

    Examples:
        >>> from_json({"_type": "Period", "value": "P2W"})
        Period.from_fields(0, 14000, 0)
    """
    from isoperiod.core.period import Period
    from isoperiod.format.iso8601 import parse_period

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")
    if type_name != TYPE_TAG:
        raise TypeError(f"unknown period type: {type_name!r}")

    fields = data.get("fields")
    if fields is not None:
        if not isinstance(fields, (list, tuple)) or len(fields) != 3:
            raise ParseError(f"'fields' must be a list of three ints, got {fields!r}")
        try:
            return Period.from_fields(*fields)
        except ValidationError as err:
            logger.debug("rejected period fields %r: %s", fields, err)
            raise ParseError(f"invalid 'fields' for Period: {err}") from err

    value = data.get("value")
    if not value:
        raise ParseError("missing 'value' or 'fields' field for Period")
    if not isinstance(value, str):
        raise ParseError(f"'value' must be a string, got {type(value).__name__}")
    return parse_period(value)


__all__ = ["to_json", "from_json"]
